import logging
import sys
from pathlib import Path

from vdom_rewrite import RewriteOptions, UrlRewriter, set_base_element
from vdom_rewrite.codec import dumps_node, dumps_patch, loads_node, loads_patch

PROXY_URL = "https://proxy.example/proxy/"


def main(host: str, tree_path: Path, patch_path: Path | None = None) -> None:
    tree = loads_node(tree_path.read_bytes())
    options = RewriteOptions.for_tree(tree, PROXY_URL, host)
    rewriter = UrlRewriter(options)

    set_base_element(tree, host)
    sys.stdout.buffer.write(dumps_node(rewriter.tree(tree)) + b"\n")

    if patch_path is not None:
        patch = rewriter.patch(loads_patch(patch_path.read_bytes()))
        sys.stdout.buffer.write(dumps_patch(patch) + b"\n")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    if len(sys.argv) < 3:
        sys.exit("usage: main.py HOST TREE_JSON [PATCH_JSON]")
    main(
        sys.argv[1],
        Path(sys.argv[2]),
        Path(sys.argv[3]) if len(sys.argv) > 3 else None,
    )
