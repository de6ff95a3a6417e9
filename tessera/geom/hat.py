#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Aperiodic "hat" monotile tiling by hierarchical metatile substitution.

Hats are grouped into four metatiles (H, T, P and F). A fixed sequence
of placement rules assembles metatiles into a patch, and specific
vertices of that patch outline four new, larger metatiles which hold
subsets of the patch's children. Repeating this builds supertiles of
supertiles to any inflation depth.

Shapes are shared by many parents so they live in a :class:`ShapeArena`
and placements refer to them by index. Nothing is mutated once a shape
has been added to the arena.

See:
    D. Smith, J. S. Myers, C. S. Kaplan, C. Goodman-Strauss,
    "An aperiodic monotile", 2023. https://arxiv.org/abs/2303.10798
"""
import math
import logging
import collections

from . import transform2d
from . import polygon

from .point import P
from .line import Line

logger = logging.getLogger(__name__)

HR3 = math.sqrt(3) / 2


def hex_point(x, y):
    """Map hex lattice coordinates to a Cartesian point."""
    return P(x + 0.5 * y, HR3 * y)

HAT_OUTLINE = tuple(hex_point(x, y) for x, y in (
    (0, 0), (-1, -1), (0, -2), (2, -2), (2, -1), (4, -2), (5, -1),
    (4, 0), (3, 0), (2, 2), (0, 3), (0, 2), (-1, 2)))

H_OUTLINE = (P(0, 0), P(4, 0), P(4.5, HR3), P(2.5, 5 * HR3),
             P(1.5, 5 * HR3), P(-0.5, HR3))
T_OUTLINE = (P(0, 0), P(3, 0), P(1.5, 3 * HR3))
P_OUTLINE = (P(0, 0), P(4, 0), P(3, 2 * HR3), P(-1, 2 * HR3))
F_OUTLINE = (P(0, 0), P(3, 0), P(3.5, HR3), P(3, 2 * HR3), P(-1, 2 * HR3))

HAT_ROLES = {'H': 'hat-h', 'T': 'hat-t', 'P': 'hat-p', 'F': 'hat-f'}
SUPERTILE_ROLES = {'H': 'supertile-h', 'T': 'supertile-t',
                   'P': 'supertile-p', 'F': 'supertile-f'}

# Patch assembly rules. Each rule places one metatile:
#   [shape] places it with the identity transform.
#   [child, edge, shape, shape_edge] matches edge `shape_edge` of the new
#   shape to edge `edge` (reversed) of an already placed child.
#   [child1, vertex1, child2, vertex2, shape, shape_edge] matches
#   edge `shape_edge` of the new shape to the segment joining a vertex
#   of child2 to a vertex of child1.
PATCH_RULES = (
    ('H',),
    (0, 0, 'P', 2),
    (1, 0, 'H', 2),
    (2, 0, 'P', 2),
    (3, 0, 'H', 2),
    (4, 4, 'P', 2),
    (0, 4, 'F', 3),
    (2, 4, 'F', 3),
    (4, 1, 3, 2, 'F', 0),
    (8, 3, 'H', 0),
    (9, 2, 'P', 0),
    (10, 2, 'H', 0),
    (11, 4, 'P', 2),
    (12, 0, 'H', 2),
    (13, 0, 'F', 3),
    (14, 2, 'F', 1),
    (15, 3, 'H', 4),
    (8, 2, 'F', 1),
    (17, 3, 'H', 0),
    (18, 2, 'P', 0),
    (19, 2, 'H', 2),
    (20, 4, 'F', 3),
    (20, 0, 'P', 2),
    (22, 0, 'H', 2),
    (23, 4, 'F', 3),
    (23, 0, 'F', 3),
    (16, 0, 'P', 2),
    (9, 4, 0, 2, 'T', 2),
    (4, 0, 'F', 3),
)

# Patch children regrouped into the next level metatiles.
H_CHILDREN = (0, 9, 16, 27, 26, 6, 1, 8, 10, 15)
P_CHILDREN = (7, 2, 3, 4, 28)
F_CHILDREN = (21, 20, 22, 23, 24, 25)
T_CHILDREN = (11,)


class SubstitutionError(Exception):
    """The fixed substitution tables produced an impossible placement."""
    pass


Placement = collections.namedtuple('Placement', ('transform', 'shape'))


class Shape(collections.namedtuple(
        'Shape', ('outline', 'children', 'role', 'super_role', 'width'))):
    """An immutable shape template.

    A hat carries an emission `role`, a metatile carries a `super_role`
    and a patch carries neither.

    Args:
        outline: Tuple of outline vertices in local coordinates.
        children: Tuple of :class:`Placement` records.
        role: Hat role tag or None.
        super_role: Supertile role tag or None.
        width: Nominal outline width. Doubles every inflation.
    """
    __slots__ = ()


class ShapeArena(object):
    """Owns every shape template built during one generation call."""

    def __init__(self):
        self.shapes = []

    def add(self, shape):
        """Add a shape and return its index."""
        self.shapes.append(shape)
        return len(self.shapes) - 1

    def __getitem__(self, index):
        return self.shapes[index]

    def __len__(self):
        return len(self.shapes)

    def child(self, shape_index, n):
        """The n'th placement of a shape."""
        children = self.shapes[shape_index].children
        if n < 0 or n >= len(children):
            raise SubstitutionError('Child index %d out of range [0, %d)'
                                    % (n, len(children)))
        return children[n]

    def child_vertex(self, placement, vertex):
        """A vertex of a placed shape's outline in the parent frame."""
        outline = self.shapes[placement.shape].outline
        if vertex < 0 or vertex >= len(outline):
            raise SubstitutionError('Vertex index %d out of range [0, %d)'
                                    % (vertex, len(outline)))
        return outline[vertex].transform(placement.transform)

    def eval_child(self, shape_index, n, vertex):
        """Vertex `vertex` of child `n` of a shape, in the shape's frame."""
        return self.child_vertex(self.child(shape_index, n), vertex)


def match_two(p1, q1, p2, q2):
    """Transform that maps segment p1->q1 onto segment p2->q2."""
    try:
        return transform2d.matrix_match_segments(p1, q1, p2, q2)
    except ValueError as e:
        raise SubstitutionError(str(e))

def recentred(outline, children):
    """Move the outline's vertex centroid to the origin.

    Returns:
        A tuple (outline, children) with the inverse translation
        folded into every child transform.
    """
    c = polygon.vertex_centroid(outline)
    m = transform2d.matrix_translate(-c.x, -c.y)
    outline = tuple(p - c for p in outline)
    children = tuple(Placement(transform2d.compose_transform(m, ch.transform),
                               ch.shape) for ch in children)
    return outline, children

def add_metatile(arena, label, outline, children, width):
    """Recentre and add a metatile to the arena."""
    outline, children = recentred(outline, children)
    return arena.add(Shape(outline, children, None,
                           SUPERTILE_ROLES[label], width))

def initial_metatiles(arena):
    """The four first level metatiles built directly from hats.

    Returns:
        A dict that maps 'H', 'T', 'P', 'F' to arena indices.
    """
    hats = {}
    for label, role in HAT_ROLES.items():
        hats[label] = arena.add(Shape(HAT_OUTLINE, (), role, None, 1))

    h_children = (
        Placement(match_two(HAT_OUTLINE[5], HAT_OUTLINE[7],
                            H_OUTLINE[5], H_OUTLINE[0]), hats['H']),
        Placement(match_two(HAT_OUTLINE[9], HAT_OUTLINE[11],
                            H_OUTLINE[1], H_OUTLINE[2]), hats['H']),
        Placement(match_two(HAT_OUTLINE[5], HAT_OUTLINE[7],
                            H_OUTLINE[3], H_OUTLINE[4]), hats['H']),
        # The one reflected hat
        Placement(transform2d.compose_transform(
            transform2d.matrix_translate(2.5, HR3),
            transform2d.compose_transform(((-0.5, -HR3, 0), (HR3, -0.5, 0)),
                                          ((0.5, 0, 0), (0, -0.5, 0)))),
                  hats['H']),
    )
    t_children = (
        Placement(((0.5, 0, 0.5), (0, 0.5, HR3)), hats['T']),
    )

    def pf_children(hat):
        return (
            Placement(((0.5, 0, 1.5), (0, 0.5, HR3)), hat),
            Placement(transform2d.compose_transform(
                transform2d.matrix_translate(0, 2 * HR3),
                transform2d.compose_transform(((0.5, HR3, 0), (-HR3, 0.5, 0)),
                                              ((0.5, 0, 0), (0, 0.5, 0)))),
                      hat),
        )

    return {
        'H': add_metatile(arena, 'H', H_OUTLINE, h_children, 2),
        'T': add_metatile(arena, 'T', T_OUTLINE, t_children, 2),
        'P': add_metatile(arena, 'P', P_OUTLINE, pf_children(hats['P']), 2),
        'F': add_metatile(arena, 'F', F_OUTLINE, pf_children(hats['F']), 2),
    }

def construct_patch(arena, tiles):
    """Assemble one patch of metatiles using :data:`PATCH_RULES`.

    Args:
        arena: The shape arena.
        tiles: A dict that maps 'H', 'T', 'P', 'F' to arena indices.

    Returns:
        Arena index of the patch.
    """
    children = []

    def placed(n):
        if n < 0 or n >= len(children):
            raise SubstitutionError('Placement rule refers to child %d of %d'
                                    % (n, len(children)))
        return children[n]

    def shape_edge(label, edge):
        outline = arena[tiles[label]].outline
        if edge < 0 or edge >= len(outline):
            raise SubstitutionError('Edge index %d out of range for %s'
                                    % (edge, label))
        return outline[edge], outline[(edge + 1) % len(outline)]

    for rule in PATCH_RULES:
        if len(rule) == 1:
            transform = transform2d.IDENTITY_MATRIX
            label = rule[0]
        elif len(rule) == 4:
            ch = placed(rule[0])
            n = len(arena[ch.shape].outline)
            p = arena.child_vertex(ch, (rule[1] + 1) % n)
            q = arena.child_vertex(ch, rule[1])
            label = rule[2]
            transform = match_two(*(shape_edge(label, rule[3]) + (p, q)))
        elif len(rule) == 6:
            p = arena.child_vertex(placed(rule[2]), rule[3])
            q = arena.child_vertex(placed(rule[0]), rule[1])
            label = rule[4]
            transform = match_two(*(shape_edge(label, rule[5]) + (p, q)))
        else:
            raise SubstitutionError('Malformed placement rule %r' % (rule,))
        children.append(Placement(transform, tiles[label]))

    width = arena[tiles['H']].width
    return arena.add(Shape((), tuple(children), None, None, width))

def construct_metatiles(arena, patch):
    """Derive the next level H, T, P, F metatiles from a patch.

    Returns:
        A dict that maps 'H', 'T', 'P', 'F' to arena indices.
    """
    def ev(n, vertex):
        return arena.eval_child(patch, n, vertex)

    def rot_about(p, angle):
        return transform2d.matrix_rotate(angle, origin=p)

    bps1 = ev(8, 2)
    bps2 = ev(21, 2)
    rbps = bps2.transform(rot_about(bps1, -2.0 * math.pi / 3.0))

    p72 = ev(7, 2)
    p252 = ev(25, 2)

    llc = Line(bps1, rbps).intersection(Line(ev(6, 2), p72))
    if llc is None:
        raise SubstitutionError('Metatile corner lines are parallel')
    w = ev(6, 2) - llc

    rot60 = transform2d.matrix_rotate(-math.pi / 3)
    h_outline = [llc, bps1]
    w = w.transform(rot60)
    h_outline.append(h_outline[1] + w)
    h_outline.append(ev(14, 2))
    w = w.transform(rot60)
    h_outline.append(h_outline[3] - w)
    h_outline.append(ev(6, 2))

    p_outline = [p72, p72 + (bps1 - llc), bps1, llc]

    f_outline = [bps2, ev(24, 2), ev(25, 0), p252, p252 + (llc - bps1)]

    aaa = h_outline[2]
    bbb = h_outline[1] + (h_outline[4] - h_outline[5])
    ccc = aaa.transform(rot_about(bbb, -math.pi / 3))
    t_outline = [bbb, ccc, aaa]

    width = arena[patch].width * 2

    def regroup(label, outline, indices):
        children = [arena.child(patch, n) for n in indices]
        return add_metatile(arena, label, outline, children, width)

    return {
        'H': regroup('H', h_outline, H_CHILDREN),
        'T': regroup('T', t_outline, T_CHILDREN),
        'P': regroup('P', p_outline, P_CHILDREN),
        'F': regroup('F', f_outline, F_CHILDREN),
    }

def build(iterations):
    """Build the shape hierarchy for an inflation depth.

    Args:
        iterations: Inflation depth (>= 1).

    Returns:
        A tuple (arena, patch_index). The patch sits `iterations + 1`
        levels above the hats.
    """
    arena = ShapeArena()
    tiles = initial_metatiles(arena)
    for _ in range(iterations - 1):
        tiles = construct_metatiles(arena, construct_patch(arena, tiles))
    return arena, construct_patch(arena, tiles)

def emit(arena, patch, iterations, include_supertiles=False):
    """Walk the hierarchy and emit world coordinate polygons.

    Supertile outlines (levels `iterations` down to 1) precede the hats.
    """
    hats = []
    levels = [[] for _ in range(iterations + 1)]
    stack = [(patch, transform2d.IDENTITY_MATRIX, iterations + 1)]
    while stack:
        index, matrix, level = stack.pop()
        shape = arena[index]
        if level == 0:
            hats.append(polygon.Polygon(
                shape.role, [p.transform(matrix) for p in shape.outline]))
            continue
        if (include_supertiles and level <= iterations
                and shape.super_role is not None):
            levels[level].append(polygon.Polygon(
                shape.super_role, [p.transform(matrix) for p in shape.outline]))
        # Reversed so that children pop in placement order
        for ch in reversed(shape.children):
            stack.append((ch.shape,
                          transform2d.compose_transform(matrix, ch.transform),
                          level - 1))
    polygons = []
    for level in range(iterations, 0, -1):
        polygons.extend(levels[level])
    polygons.extend(hats)
    return polygons

def generate(iterations, include_supertiles=False):
    """Generate a hat tiling.

    Args:
        iterations: Inflation depth. Rounded and clamped to >= 1.
        include_supertiles: Also emit metatile outlines for every level.

    Returns:
        A list of :class:`polygon.Polygon` centered on the origin.
    """
    iterations = max(1, int(round(iterations)))
    arena, patch = build(iterations)
    polygons = emit(arena, patch, iterations, include_supertiles)
    logger.debug('hat: iterations=%d, shapes=%d, polygons=%d',
                 iterations, len(arena), len(polygons))
    return polygon.center_polygons(polygons)

def hat_count(iterations):
    """Number of hats emitted for an inflation depth.

    Depth 1 is the 29 metatile patch itself: 10 H (4 hats each),
    8 P and 10 F (2 each) and one T, 77 hats in all.
    """
    iterations = max(1, int(round(iterations)))
    h, t, p, f = 4, 1, 2, 2
    for _ in range(iterations - 1):
        h, t, p, f = (3 * h + t + 3 * p + 3 * f, h,
                      2 * f + 2 * h + p, 3 * f + 2 * h + p)
    return 10 * h + 8 * p + 10 * f + t
