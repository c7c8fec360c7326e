"""
Subscriber API — Middleware Package
=====================================

Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

Request ID runs outermost so the access log and the exception handlers can
read the id from request_id_var.
"""
