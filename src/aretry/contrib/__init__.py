r"""Optional integrations with third-party libraries.

The modules of this package import their library eagerly; install the
matching extra (for example ``pip install aretry[httpx]``) before
importing them.
"""
