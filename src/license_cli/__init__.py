"""license-cli: interactive license file generator for package.json projects."""

__version__ = "0.1.0"
