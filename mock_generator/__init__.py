"""
Service Mock Generator

A small HTTP service that reads an OpenAPI document (or just a service name)
and asks a chat-completion model to write something unkind about it.
"""

__version__ = "1.0.0"
