"""Routing: exported route table and outbound URL generation.

Routes arrive pre-compiled from the server and are frozen into a
``RouteTable``; ``UrlGenerator`` turns a name and parameters back into
a URL.
"""
