"""
Service layer.

Each service is a class of async classmethods that owns the SQL for one
resource and returns the frozen records defined in ``app.models``.
Cross-resource cleanup on account creation and deletion lives in
``lifecycle``.
"""
