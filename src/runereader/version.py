from importlib.metadata import PackageNotFoundError, version

try:
    version = version("RuneReader")
except PackageNotFoundError:
    version = "0.0.0"
