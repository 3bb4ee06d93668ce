"""Field-service backend with technician route sequencing."""

__version__ = "0.1.0"
