"""Sphinx configuration for schdoc-ascii documentation."""

import schdoc_ascii

project = "schdoc-ascii"
copyright = "2026, schdoc-ascii contributors"
author = "schdoc-ascii contributors"
release = schdoc_ascii.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

autosummary_generate = True

templates_path = ["_templates"]
exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
