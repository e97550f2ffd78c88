"""Engine configuration and wiring."""
from tildetpl.runtime.config import EngineConfig
from tildetpl.runtime.container import EngineBuilder

__all__ = ['EngineBuilder', 'EngineConfig']
