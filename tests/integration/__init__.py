"""
Integration tests for QueryMapper.
"""
