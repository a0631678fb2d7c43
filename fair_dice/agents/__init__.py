"""
Registry of computer opponents.
Agent classes register themselves with @register_agent("name"); make_agent builds one by name and hands it
the engine's random source so every draw in a game comes from the same place.
"""

AGENT_MAP = {}


def register_agent(name):
    """
    Decorator to register an agent class under a given name.
    Usage:
        @register_agent("random")
        class RandomAgent(Agent): ...
    """
    def decorator(cls):
        AGENT_MAP[name] = cls
        return cls
    return decorator


def make_agent(name: str, random_source=None):
    """
    Build a registered agent.
    Args:
        name (str): Key in AGENT_MAP.
        random_source (SecureRandomSource, optional): Source used by agents that draw randomness.
    Returns:
        Agent: The agent instance.
    Raises:
        ValueError: If the name is not registered.
    """
    if name not in AGENT_MAP:
        raise ValueError(f"Unknown agent: {name}")
    return AGENT_MAP[name](random_source=random_source)


# registration runs on import
from . import optimal_agent, random_agent  # noqa: E402,F401
