"""
Subscriber API — Routes Package
=================================

Route Inventory:
    - subscribers.py:  list / get / create / update / delete, mounted at settings.api_prefix
    - health.py:       GET /health

Routes are thin: they pull input out of the request, call the service and
return its result. Status codes for failures come from the exception handlers.
"""
