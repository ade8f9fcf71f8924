# python
"""
treeshell/handlers/ls.py
Handler for `ls`. Plain output is one child name per line in tree order;
`-l` switches to a long listing with `.` and `..` entries.
"""
from typing import List

DEFAULT_DIR_PERMS = "drwxr-xr-x"
DEFAULT_FILE_PERMS = "-rw-r--r--"
DEFAULT_OWNER = "user"
DEFAULT_GROUP = "user"
DEFAULT_TIMESTAMP = "Jan 01 00:00"


def _format_ls_entry(node, name: str) -> str:
    perms = DEFAULT_DIR_PERMS if node.is_dir else DEFAULT_FILE_PERMS
    links = 2 + sum(1 for child in node.childnodes if child.is_dir) if node.is_dir else 1
    size = len((node.contents or "").encode()) if node.is_file else 4096
    return f"{perms} {links:>3} {DEFAULT_OWNER} {DEFAULT_GROUP} {size:>8} {DEFAULT_TIMESTAMP} {name}"


async def run(session, resolver, argv):
    flags = "".join(arg[1:] for arg in argv[1:] if arg.startswith("-") and len(arg) > 1)
    long_format = "l" in flags
    targets = [arg for arg in argv[1:] if arg and not arg.startswith("-")] or [""]

    sections: List[str] = []
    for target in targets:
        result = await resolver.resolve(session.current, target)
        display = target or "."
        if not result:
            sections.append(f"ls: cannot access '{display}': No such file or directory")
            continue
        node = result.node
        if not node.is_dir:
            sections.append(_format_ls_entry(node, target or node.name) if long_format else (target or node.name))
            continue
        children = await resolver.list_children(node)
        lines: List[str] = []
        if len(targets) > 1:
            lines.append(f"{display}:")
        if long_format:
            lines.append(_format_ls_entry(node, "."))
            lines.append(_format_ls_entry(node.parent or node, ".."))
            lines.extend(_format_ls_entry(child, child.name) for child in children)
        else:
            lines.extend(child.name for child in children)
        sections.append("\n".join(lines))
    return ("\n\n" if len(targets) > 1 else "\n").join(section for section in sections if section)
