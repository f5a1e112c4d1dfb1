"""
DBnomics course helpers

Modules:
- dbnomics_bib: Citations (BibTeX / BibLaTeX) and coverage summaries for DBnomics data
"""
