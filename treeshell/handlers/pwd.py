# python
"""
treeshell/handlers/pwd.py
Handler for `pwd` that prints the session's current node path.
"""


async def run(session, resolver, argv):
    return session.cwd
