"""Side chain, gain stages, Chebyshev filter stage and parameter set of an audio compressor."""

__version__ = "0.1.0"
__all__ = ["chebyshev", "gain_stage", "side_chain", "parameters"]