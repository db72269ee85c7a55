"""Shipped ``input_<locale>.ts`` catalogues, read through ``importlib.resources``."""
