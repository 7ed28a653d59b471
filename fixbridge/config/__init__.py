"""
Bridge configuration: defaults, YAML overrides and validation.
"""
