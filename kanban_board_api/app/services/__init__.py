"""
Service layer.

``BoardService`` and ``TaskService`` hold the board and task logic and
are the only callers of the document store.  ``TaskRepository``
manipulates the task list embedded in a column; it never touches the
store itself.
"""
