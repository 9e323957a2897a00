"""
ABI export tests

Run with:
   pytest abacus_abis/tests/ -v
"""
