from .builder import MuzzleBuilder
from .handler import MockHandler
from .muzzle import Muzzle
from .stack import HandlerStack
from .transport import MuzzleTransport

__all__ = ["HandlerStack", "MockHandler", "Muzzle", "MuzzleBuilder", "MuzzleTransport"]
