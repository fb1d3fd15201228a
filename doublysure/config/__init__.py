"""Configuration for doublysure: feature flags."""
