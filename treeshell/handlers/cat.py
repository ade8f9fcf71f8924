# python
"""
treeshell/handlers/cat.py
Handler for `cat` that prints file contents verbatim.
"""


async def run(session, resolver, argv):
    targets = argv[1:]
    if not targets:
        return "cat: missing operand"
    out = []
    for target in targets:
        result = await resolver.resolve(session.current, target)
        if not result:
            out.append(f"cat: {target}: No such file or directory")
        elif result.node.is_dir:
            out.append(f"cat: {target}: Is a directory")
        else:
            out.append(result.node.contents or "")
    return "\n".join(out)
