"""Django project package for the GBVMIS records backend."""
