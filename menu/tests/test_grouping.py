import unittest
from menu.domain.MenuItem import MenuItem
from menu.logic.catalog.grouping import categories_of, flatten_sections, group_by_category


def _item(item_id, title, category):
    return MenuItem(str(item_id), title, "1.00", category)


class TestGrouping(unittest.TestCase):

    def setUp(self):
        self.items = [
            _item(1, "Water", "Beverages"),
            _item(2, "Hummus", "Appetizers"),
            _item(3, "Coke", "Beverages"),
            _item(4, "Greek Salad", "Salads"),
            _item(5, "Fried Mushroom", "Appetizers"),
        ]

    def test_sections_follow_first_seen_category_order(self):
        sections = group_by_category(self.items)
        self.assertEqual([s.title for s in sections], ["Beverages", "Appetizers", "Salads"])

    def test_items_keep_relative_order(self):
        sections = group_by_category(self.items)
        self.assertEqual([i.title for i in sections[0].data], ["Water", "Coke"])
        self.assertEqual([i.title for i in sections[1].data], ["Hummus", "Fried Mushroom"])

    def test_regrouping_flattened_sections_is_stable(self):
        sections = group_by_category(self.items)
        self.assertEqual(group_by_category(flatten_sections(sections)), sections)

    def test_empty_input(self):
        self.assertEqual(group_by_category([]), [])
        self.assertEqual(group_by_category(flatten_sections([])), [])

    def test_categories_of(self):
        self.assertEqual(categories_of(self.items), ["Beverages", "Appetizers", "Salads"])
