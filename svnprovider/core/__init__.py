"""
Core of svnprovider: container, settings, exceptions, interfaces and models.
"""
