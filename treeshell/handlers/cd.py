# python
"""
treeshell/handlers/cd.py
Handler for `cd`: resolve the target and move the session pointer when it is
a directory.
"""


async def run(session, resolver, argv):
    target = argv[1] if len(argv) > 1 else session.home
    result = await resolver.resolve(session.current, target)
    if not result:
        return f"bash: cd: {target}: No such file or directory"
    if not result.node.is_dir:
        return f"bash: cd: {target}: Not a directory"
    session.change_directory(result.node)
    return ""
