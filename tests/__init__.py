"""
Test Suite

- dbnomics_bib/test_citation_builder.py: citation keys, endpoints, fail-loud errors, rendering
- dbnomics_bib/test_formatters.py: BibTeX / BibLaTeX layout and escaping
- dbnomics_bib/test_config_ids.py: env configuration, DBnomics id parsing
- dbnomics_bib/test_coverage_bibfile.py: coverage summary, .bib output
- dbnomics_bib/test_cli.py: cite command smoke tests
"""
