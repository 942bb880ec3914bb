from .driver import AnimationDriver, advance_state, world_mesh

__all__ = ["AnimationDriver", "advance_state", "world_mesh"]
