"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that every entity uses
(settings, DB wiring, the generic query template, error mapping, middleware).
Keep entity-specific SQL and business logic in the corresponding feature
package (e.g. `recipes/`).
"""
