"""bindgen — language bindings for Terraform providers and modules."""

__version__ = "0.1.0"
