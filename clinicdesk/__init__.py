"""Front-desk console for a small clinic: doctors, appointments, billing and patient records."""

__version__ = "0.1.0"
__all__ = ["__version__"]