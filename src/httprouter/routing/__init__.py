"""Routing — path patterns, guards, route expansion, and dispatch.

Declarations are compiled into an immutable, ordered route table at
startup; requests are resolved against it by a stateless dispatcher.
"""
