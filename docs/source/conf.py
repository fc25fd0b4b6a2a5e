import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath('../../'))

project = 'fab'
copyright = '2025, fab contributors'
author = 'fab contributors'
release = '0.1'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
]

templates_path = ['_templates']
exclude_patterns = [
    '_build',
    'Thumbs.db',
    '.DS_Store',
    '.venv',
    '**/.venv/**'
]

language = 'en'
html_theme = 'alabaster'
