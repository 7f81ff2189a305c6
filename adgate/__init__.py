"""
adgate: signed REST gateway in front of an Active Directory client library.

Application package root, layered the same way as the services it sits
beside:
    - domain: directory ports (ABCs), operation results, errors.
    - application: running one directory operation and capturing its outcome.
    - infrastructure: loading the configured directory client.
    - interfaces: FastAPI routers, body and query translation, response normalization.
    - shared: cross-cutting concerns (errors, security, logging).
"""
