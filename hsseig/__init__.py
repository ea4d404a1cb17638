"""Trees, HSS generators, compression, Cauchy-like products and eigen-data records for symmetric HSS eigensolvers."""

__version__ = "0.1.0"