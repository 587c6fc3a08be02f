"""Console Banking System: in-memory console banking simulator"""

__version__ = "1.0.0"
