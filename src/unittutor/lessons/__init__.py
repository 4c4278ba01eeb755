"""Lesson subjects.

The example programs discussed in the lesson documents: a calculator, a todo
list, a library catalog, ``factorial``, explicit pricing configuration, a
notifier used to demonstrate mocking and an async profile lookup used to
demonstrate async tests. Each module is deliberately small; the lessons are about
how to test them, not about the code itself.
"""
