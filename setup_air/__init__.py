"""
setup-air: install the Air formatter into a CI tool cache.
"""
