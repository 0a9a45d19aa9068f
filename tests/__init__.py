"""
Test suite for PyColorNoise package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for fields, blur, normalization, shaping, quantization and generators
- Spectral character checks for each noise color
- Integration tests for complete workflows

Run with: pytest
"""
