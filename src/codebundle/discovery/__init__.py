"""File discovery and language resolution."""
from codebundle.discovery.file_discovery import FileDiscovery
from codebundle.discovery.languages import ExtensionResolver, resolve_extensions

__all__ = ['ExtensionResolver', 'FileDiscovery', 'resolve_extensions']
