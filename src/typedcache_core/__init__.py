"""Typed cache domain: settings, exceptions, interfaces, and result models."""
