"""Protocol types shared across codebundle components."""
from codebundle.core.interfaces.fs import (
    BundleWriterProtocol,
    FileDiscoveryProtocol,
    FileReaderProtocol,
)
from codebundle.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from codebundle.core.interfaces.render import RendererProtocol

__all__ = [
    'BundleWriterProtocol',
    'FileDiscoveryProtocol',
    'FileReaderProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'RendererProtocol',
]
