"""
HTTP routes of the calculator service.

``router`` aggregates the endpoint modules; ``create_app`` mounts it at
the application root so the public path stays ``/calculator``.
"""
