"""Configuration, type mapping and chunk planning for MongoDB, MySQL and Postgres sync drivers."""

__version__ = "0.1.0"