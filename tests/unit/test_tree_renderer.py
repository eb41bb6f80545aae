"""
Unit tests for depth-bounded ASCII tree rendering.
"""

import pytest
from lxml import etree
from pydantic import ValidationError

from xml_tree_tab.exceptions import UnsupportedInputKind
from xml_tree_tab.models import Node, Nodeset, RenderOptions
from xml_tree_tab.parsers.tree_renderer import format_tree, render_tree, truncate_text


class TestRenderTree:
    """Test suite for render_tree()."""
    
    def test_full_tree(self, nested_listing):
        assert render_tree(nested_listing) == [
            'root',
            '|-listing',
            '  |-payment_types: "paypal"',
            '  |-shipping_info: "free"',
            '  |-seller_info',
            '    |-name: "bob"',
        ]
    
    def test_depth_zero_shows_root_only(self, nested_listing):
        assert render_tree(nested_listing, depth=0) == ['root']
    
    def test_depth_limits_expansion(self, nested_listing):
        assert render_tree(nested_listing, depth=2) == [
            'root',
            '|-listing',
            '  |-payment_types: "paypal"',
            '  |-shipping_info: "free"',
            '  |-seller_info',
        ]
    
    def test_same_order_as_enumerate_paths(self, nested_listing):
        """Rendering reuses the enumeration walk, so tags line up."""
        from xml_tree_tab.parsers.path_parser import enumerate_paths
        
        rendered_tags = [
            line.split('|-')[-1].split(':')[0] for line in render_tree(nested_listing)
        ]
        enumerated_tags = [entry.address.rsplit('/', 1)[-1] for entry in enumerate_paths(nested_listing)]
        
        assert rendered_tags == enumerated_tags
    
    def test_long_text_truncated(self):
        node = Node(tag='root', children=[Node(tag='note', text='x' * 100)])
        
        lines = render_tree(node, options=RenderOptions(max_text_length=5))
        
        assert lines[1] == '|-note: "xxxxx..."'
    
    def test_text_hidden_when_length_zero(self, nested_listing):
        lines = render_tree(nested_listing, options=RenderOptions(max_text_length=0))
        
        assert '  |-payment_types' in lines
    
    def test_non_terminal_text_not_shown(self):
        node = Node(tag='root', text='ignored', children=[Node(tag='a')])
        
        assert render_tree(node) == ['root', '|-a']
    
    def test_custom_layout(self, abcd_tree):
        options = RenderOptions(indent='    ', branch='+-')
        
        assert render_tree(abcd_tree, options=options) == ['a', '+-b', '+-c', '    +-d']
    
    def test_depth_argument_overrides_options(self, abcd_tree):
        options = RenderOptions(depth=5, branch='+-')
        
        assert render_tree(abcd_tree, depth=1, options=options) == ['a', '+-b', '+-c']
    
    def test_nodeset_members_separated(self):
        nodes = Nodeset(nodes=[Node(tag='a'), Node(tag='b', children=[Node(tag='c')])])
        
        assert render_tree(nodes) == ['a', '---', 'b', '|-c']
    
    def test_lxml_element_accepted(self):
        element = etree.fromstring('<a><b>1</b></a>')
        
        assert render_tree(element) == ['a', '|-b: "1"']
    
    def test_negative_depth_rejected(self, abcd_tree):
        with pytest.raises(ValidationError):
            render_tree(abcd_tree, depth=-1)
    
    @pytest.mark.parametrize('source', ['root', 3.14, object()])
    def test_unsupported_input(self, source):
        with pytest.raises(UnsupportedInputKind):
            render_tree(source)
    
    def test_does_not_mutate_tree(self, nested_listing):
        before = nested_listing.model_dump()
        
        render_tree(nested_listing, depth=1)
        
        assert nested_listing.model_dump() == before
    
    def test_format_tree_joins_lines(self, abcd_tree):
        assert format_tree(abcd_tree, depth=1) == 'a\n|-b\n|-c'


class TestTruncateText:
    
    def test_short_text_unchanged(self):
        assert truncate_text('paypal', 10) == 'paypal'
    
    def test_whitespace_collapsed(self):
        assert truncate_text('a   very\n long', 20) == 'a very long'
    
    def test_cut_with_ellipsis(self):
        assert truncate_text('abcdefgh', 3) == 'abc...'
