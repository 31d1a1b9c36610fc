import importlib.metadata

metadata = importlib.metadata.metadata("justmaybe")

project = metadata["Name"]
version = release = metadata["Version"]

nitpicky = True
# type variables aren't documented themselves
nitpick_ignore = [
    ("py:class", f"justmaybe._pymaybe.{name}") for name in ("_T", "_A", "_B")
]
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx_copybutton",
]
master_doc = "index"
exclude_patterns = ["_build"]

autodoc_member_order = "bysource"
html_theme = "furo"
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}
