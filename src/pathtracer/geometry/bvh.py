# geometry/bvh.py
import logging
from functools import reduce
from typing import List, Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.errors import InvalidInputError
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

def sah_split_index(boxes: Sequence[AABB]) -> int:
    """
    Pick the split for boxes already sorted along the split axis.

    Returns i such that the left child gets boxes[0..i] and the right child
    boxes[i+1..]. The prefix and suffix surface areas come from one forward
    and one backward sweep; the first minimum of
    i * prefix_area[i] + (n - 1 - i) * suffix_area[i + 1] wins.
    """
    n = len(boxes)
    if n < 2:
        raise InvalidInputError("a split needs at least two primitives")

    prefix_area = [0.0] * n
    running = boxes[0]
    prefix_area[0] = running.surface_area()
    for i in range(1, n):
        running = AABB.surrounding_box(running, boxes[i])
        prefix_area[i] = running.surface_area()

    suffix_area = [0.0] * n
    running = boxes[n - 1]
    suffix_area[n - 1] = running.surface_area()
    for i in range(n - 2, -1, -1):
        running = AABB.surrounding_box(running, boxes[i])
        suffix_area[i] = running.surface_area()

    best_split = 0
    best_cost = float('inf')
    for i in range(n - 1):
        cost = i * prefix_area[i] + (n - 1 - i) * suffix_area[i + 1]
        if cost < best_cost:
            best_cost = cost
            best_split = i
    return best_split

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    left is always set; right is None only for a node wrapping a single
    primitive. The tree is immutable after build() and can be queried from
    several threads at once.
    """
    __slots__ = ("left", "right", "box")

    def __init__(self, left: Hittable, right: Optional[Hittable], box: AABB):
        self.left = left
        self.right = right
        self.box = box

    @classmethod
    def build(cls, objects: Sequence[Hittable]) -> "BVHNode":
        """
        Build a tree over objects using the surface area heuristic.
        The input sequence is not modified.
        """
        if not objects:
            raise InvalidInputError("cannot build a BVH from an empty primitive list")

        # Coincident boxes tie the split cost at every index and give a chain
        # as deep as the input is long, so the tree is built from a work stack.
        root = cls(None, None, None)
        stack = [(root, list(objects))]
        while stack:
            node, span = stack.pop()
            boxes = [obj.bounding_box() for obj in span]

            if len(span) == 1:
                node.left, node.box = span[0], boxes[0]
                continue

            # Sort along the longest axis of the enclosing box by box minimum.
            # sorted() is stable, so equal keys keep their input order.
            node.box = reduce(AABB.surrounding_box, boxes)
            axis = node.box.longest_axis()
            order = sorted(range(len(span)), key=lambda i: boxes[i].minimum[axis])
            span = [span[i] for i in order]

            if len(span) == 2:
                node.left, node.right = span
                continue

            split = sah_split_index([boxes[i] for i in order]) + 1
            node.left = cls(None, None, None)
            node.right = cls(None, None, None)
            stack.append((node.right, span[split:]))
            stack.append((node.left, span[:split]))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Built BVH over %d primitives (%d nodes, depth %d)",
                         len(objects), root.node_count(), root.depth())
        return root

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        closest = None
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, BVHNode):
                # Anything found from here on must beat the closest hit so far.
                if item.box.hit(ray, t_min, t_max):
                    stack.extend(reversed(item.children()))
                continue
            rec = item.hit(ray, t_min, t_max)
            if rec is not None:
                closest = rec
                t_max = rec.t
        return closest

    def bounding_box(self) -> AABB:
        return self.box

    def children(self) -> List[Hittable]:
        return [self.left] if self.right is None else [self.left, self.right]

    def nodes(self) -> List["BVHNode"]:
        """
        Every interior node, in preorder.
        """
        result = []
        stack = [self]
        while stack:
            node = stack.pop()
            result.append(node)
            stack.extend(child for child in reversed(node.children())
                         if isinstance(child, BVHNode))
        return result

    def leaves(self) -> List[Hittable]:
        """
        The primitives stored in the tree, left to right.
        """
        result = []
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, BVHNode):
                stack.extend(reversed(item.children()))
            else:
                result.append(item)
        return result

    def node_count(self) -> int:
        return len(self.nodes())

    def depth(self) -> int:
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children()
                         if isinstance(child, BVHNode))
        return deepest

    def __reduce__(self):
        # Pickled as a flat node table; the default would recurse once per level.
        nodes = self.nodes()
        index = {id(node): i for i, node in enumerate(nodes)}

        def ref(child):
            return index[id(child)] if isinstance(child, BVHNode) else child

        table = [(ref(node.left), ref(node.right), node.box) for node in nodes]
        return (_from_table, (table,))

def _from_table(table) -> BVHNode:
    nodes = [BVHNode(None, None, box) for _, _, box in table]
    for node, (left, right, _) in zip(nodes, table):
        node.left = nodes[left] if isinstance(left, int) else left
        node.right = nodes[right] if isinstance(right, int) else right
    return nodes[0]
