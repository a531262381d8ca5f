"""Cookie Investigator: flag tracking cookies and requests on a web page."""

__version__ = "0.1.0"
