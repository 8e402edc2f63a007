"""Interface HTTP (FastAPI) du catalogue Guava."""
