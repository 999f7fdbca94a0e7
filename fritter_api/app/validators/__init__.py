"""
Request validators.

Validators are FastAPI dependencies listed, in order, in a route's
``dependencies``.  Each one either returns (letting the chain go on) or
raises an ``HTTPException`` that ends the request; later validators and
the handler never run.  Validators that look a record up return it, and
because FastAPI caches dependency results per request, handlers can
depend on the same validator to receive the record without a second
query.

Errors are rendered as ``{"error": <detail>}`` by the application's
exception handler.  Missing records use a keyed detail such as
``{"profileNotFound": "..."}``.
"""
