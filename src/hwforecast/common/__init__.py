"""src/hwforecast/common/__init__.py"""
