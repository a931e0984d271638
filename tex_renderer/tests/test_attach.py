"""Tests for rank-gated attachment."""
import itertools
import unittest

from tex_renderer.model.attach import attach, can_attach, rank_threshold
from tex_renderer.model.elements import (
    Chapter,
    Environment,
    Input,
    Level,
    List,
    ListMode,
    Paragraph,
    Part,
    Section,
    Text,
    TextStyle,
    UserDefined,
    rank,
)
from tex_renderer.model.errors import RankError, TexError

CONTAINER_FACTORIES = {
    "part": (lambda: Part("P"), 0),
    "chapter": (lambda: Chapter("C"), 1),
    "section": (lambda: Section("S"), 2),
    "paragraph": (lambda: Paragraph("Par"), 3),
    "environment": (lambda: Environment("equation"), 7),
}

CHILD_FACTORIES = [
    lambda: Part("child part"),
    lambda: Chapter("child chapter"),
    lambda: Section("child section"),
    lambda: Paragraph("child paragraph"),
    lambda: UserDefined("raw", Level.BODY),
    lambda: List(ListMode.ITEMIZE, ["a"]),
    lambda: Environment("verbatim", ["code"]),
    lambda: Input("chapter1"),
    lambda: Text("words", TextStyle.BOLD),
]


def _stored(container):
    return container.items if isinstance(container, Environment) else container.children


class AttachRankTest(unittest.TestCase):
    """Attach succeeds exactly when the child outranks the container threshold."""

    def test_all_container_child_pairs(self) -> None:
        for (name, (make_parent, threshold)), make_child in itertools.product(
            CONTAINER_FACTORIES.items(), CHILD_FACTORIES
        ):
            parent = make_parent()
            child = make_child()
            before = len(_stored(parent))
            self.assertEqual(rank_threshold(parent), threshold)
            expected = rank(child) > threshold
            self.assertEqual(can_attach(parent, child), expected)
            with self.subTest(parent=name, child=type(child).__name__):
                if expected:
                    parent.attach(child)
                    self.assertEqual(len(_stored(parent)), before + 1)
                else:
                    with self.assertRaises(RankError):
                        parent.attach(child)
                    self.assertEqual(len(_stored(parent)), before)

    def test_equal_rank_is_rejected(self) -> None:
        part = Part("outer")
        with self.assertRaises(RankError) as ctx:
            part.attach(Part("inner"))
        self.assertEqual(part.children, [])
        error = ctx.exception
        self.assertIsInstance(error, TexError)
        self.assertEqual(error.parent_kind, "Part")
        self.assertEqual(error.child_kind, "Part")
        self.assertEqual(error.child_rank, 0)
        self.assertEqual(error.threshold, 0)
        self.assertIn("Rank Error", str(error))

    def test_chapter_inside_paragraph_is_rejected(self) -> None:
        paragraph = Paragraph("par")
        paragraph.attach(Text("before"))
        with self.assertRaises(RankError):
            paragraph.attach(Chapter("nope"))
        self.assertEqual([type(c) for c in paragraph.children], [Text])

    def test_leaf_parent_is_a_type_error(self) -> None:
        with self.assertRaises(TypeError):
            attach(Text("leaf"), Text("child"))  # type: ignore[arg-type]


class AttachOrderTest(unittest.TestCase):
    """Rank gates children but never reorders them."""

    def test_insertion_order_is_preserved(self) -> None:
        part = Part("P")
        sequence = [
            Text("t1"),
            Section("s1"),
            Input("i1"),
            Chapter("c1"),
            List(ListMode.ENUMERATE, ["x"]),
            Paragraph("par"),
            UserDefined("raw"),
        ]
        for child in sequence:
            part.attach(child)
        self.assertEqual(len(part.children), len(sequence))
        self.assertEqual(part.children, sequence)
        self.assertEqual(
            [type(c).__name__ for c in part.children],
            ["Text", "Section", "Input", "Chapter", "List", "Paragraph", "UserDefined"],
        )

    def test_attached_child_is_an_independent_copy(self) -> None:
        section = Section("S")
        chapter = Chapter("C")
        chapter.attach(section)
        section.attach(Text("added later"))
        section.label = "renamed"
        self.assertEqual(chapter.children[0], Section("S"))
        self.assertIsNot(chapter.children[0], section)


class EnvironmentAttachTest(unittest.TestCase):
    """Environments only take text-tier leaves and keep their rendered markup."""

    def test_text_is_stored_as_rendered_string(self) -> None:
        env = Environment("center")
        env.attach(Text("Centered", TextStyle.BOLD))
        self.assertEqual(env.items, ["\\par \\textbf{Centered}"])
        self.assertIsInstance(env.items[0], str)

    def test_input_and_part_are_rejected(self) -> None:
        env = Environment("center")
        for child in (Input("file"), Part("P"), Environment("inner")):
            with self.assertRaises(RankError):
                env.attach(child)
        self.assertEqual(env.items, [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
