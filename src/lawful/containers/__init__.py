"""Container kinds."""

from lawful.containers.all import All
from lawful.containers.first import First
from lawful.containers.maybe import Maybe
from lawful.containers.unit import Unit

__all__ = ["All", "First", "Maybe", "Unit"]
