"""
Services backing svnprovider: logging and Subversion client configuration.
"""
