"""CuraLink: patient/researcher accounts and biomedical research aggregation."""

__version__ = "0.1.0"
