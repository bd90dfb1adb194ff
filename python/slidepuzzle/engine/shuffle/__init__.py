from slidepuzzle.engine.shuffle.generator import (
    ShuffleGenerator,
    generate_shuffle,
    scramble,
)

__all__ = ["ShuffleGenerator", "generate_shuffle", "scramble"]
