import os
import sys

# -- Path setup --------------------------------------------------------------
# Add project root to sys.path to import the package
sys.path.insert(0, os.path.abspath(".."))

# -- Project information -----------------------------------------------------
project = "pomkit"
author = "pomkit developers"

# Dynamically detect version:
# 1) Try package metadata (requires pip install -e .)
# 2) Fallback to pomkit.__version__ if available
# 3) Default to known release if neither works
from importlib.metadata import version as _get_version, PackageNotFoundError


try:
    release = _get_version("pomkit")
except PackageNotFoundError:
    try:
        import pomkit
        release = pomkit.__version__
    except (ImportError, AttributeError):
        # Fallback default
        release = "0.1.0"
# Use only major.minor for short version
version = ".".join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosectionlabel",
    "sphinx.ext.githubpages",
]

templates_path = ["_templates"]
exclude_patterns = []
autosectionlabel_prefix_document = True

autodoc_default_options = {
    "members": True,
    "undoc-members": True,
    "show-inheritance": True,
}

# -- Options for HTML output -------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_static_path = []
