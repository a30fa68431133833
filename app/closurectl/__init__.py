"""closurectl - dependency-closure exporter for minimal container images."""

__version__ = "0.1.0"
