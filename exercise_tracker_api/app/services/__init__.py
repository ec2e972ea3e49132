"""
Service layer abstraction.

Each service encapsulates business logic for one concern and works on
the ``UserRegistry`` it is given, so API handlers stay thin and the
store can be swapped or isolated in tests.
"""
