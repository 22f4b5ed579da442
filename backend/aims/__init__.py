"""AIMS inventory administration backend."""
