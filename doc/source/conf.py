# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

from pyzero import __version__

# -- Project information -----------------------------------------------

project = 'PyZero'
version = __version__  # Short X.Y version.
release = version  # Full version, including alpha/beta/rc tags.

# -- General configuration ---------------------------------------------

extensions = ['sphinx.ext.autodoc',
              'sphinx.ext.autosummary',
              'sphinx.ext.napoleon',
              'sphinx.ext.todo', ]
templates_path = ['_templates']
exclude_patterns = []

autodoc_default_options = {
    'members': True,
    'special-members': '__init__',
    'exclude-members': '__abstractmethods__, __dict__, __hash__, '
                       '__module__, __slots__, __weakref__'}

napoleon_numpy_docstring = True
todo_include_todos = True

# -- Options for HTML output -------------------------------------------

html_theme = 'pydata_sphinx_theme'
html_static_path = ['_static']
