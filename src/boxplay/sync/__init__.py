from boxplay.sync.diff import Appended, Mutation, Removed, Replaced, synchronize

__all__ = ["Appended", "Mutation", "Removed", "Replaced", "synchronize"]
