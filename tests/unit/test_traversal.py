"""
Unit tests for terminal classification, input normalization and walking.
"""

import pytest
from lxml import etree

from xml_tree_tab.exceptions import MalformedTree, UnsupportedInputKind
from xml_tree_tab.models import Node, Nodeset
from xml_tree_tab.parsers.traversal import as_roots, is_terminal, resolve_address, walk


class TestTerminalClassifier:
    """A node is terminal iff it has no children."""
    
    def test_text_only_node_is_terminal(self):
        assert is_terminal(Node(tag='name', text='bob')) is True
    
    def test_empty_node_is_terminal(self):
        assert is_terminal(Node(tag='empty')) is True
    
    def test_node_with_children_is_not_terminal(self):
        node = Node(tag='seller_info', children=[Node(tag='name', text='bob')])
        
        assert is_terminal(node) is False
    
    def test_node_with_text_and_children_is_not_terminal(self):
        """Text does not make a branching node terminal."""
        node = Node(tag='mixed', text='hello', children=[Node(tag='b')])
        
        assert is_terminal(node) is False


class TestInputNormalization:
    """Test suite for as_roots()."""
    
    def test_single_node(self, abcd_tree):
        assert as_roots(abcd_tree) == (abcd_tree,)
    
    def test_nodeset(self):
        nodes = Nodeset(nodes=[Node(tag='a'), Node(tag='b')])
        
        assert [root.tag for root in as_roots(nodes)] == ['a', 'b']
    
    def test_list_of_nodes(self):
        roots = as_roots([Node(tag='a'), Node(tag='b')])
        
        assert [root.tag for root in roots] == ['a', 'b']
    
    def test_lxml_element_is_converted(self):
        element = etree.fromstring('<a><b>1</b></a>')
        
        roots = as_roots(element)
        
        assert len(roots) == 1
        assert roots[0].tag == 'a'
        assert roots[0].children[0].text == '1'
    
    @pytest.mark.parametrize('source', ['<a/>', 42, None, {'tag': 'a'}])
    def test_unsupported_kinds_raise(self, source):
        with pytest.raises(UnsupportedInputKind):
            as_roots(source)
    
    def test_list_with_non_nodes_raises(self):
        with pytest.raises(UnsupportedInputKind, match="only Node objects"):
            as_roots([Node(tag='a'), 'b'])


class TestWalk:
    """Test suite for the shared depth-first walk."""
    
    def test_pre_order_document_order(self, abcd_tree):
        visits = list(walk(abcd_tree))
        
        assert [visit.path for visit in visits] == [
            ('a',), ('a', 'b'), ('a', 'c'), ('a', 'c', 'd')
        ]
        assert [visit.level for visit in visits] == [0, 1, 1, 2]
        assert [visit.terminal for visit in visits] == [False, True, False, True]
    
    def test_max_depth_limits_levels(self, abcd_tree):
        assert [visit.node.tag for visit in walk(abcd_tree, max_depth=1)] == ['a', 'b', 'c']
        assert [visit.node.tag for visit in walk(abcd_tree, max_depth=0)] == ['a']
    
    def test_cycle_raises_malformed_tree(self):
        """A node that contains itself should fail instead of looping."""
        node = Node.model_construct(tag='a', attributes={}, text=None, children=[])
        node.children.append(node)
        
        with pytest.raises(MalformedTree, match="Cycle"):
            list(walk(node))
    
    def test_shared_subtree_is_not_a_cycle(self):
        """The same node object under two parents is visited twice."""
        shared = Node(tag='x', text='1')
        root = Node(tag='r', children=[
            Node(tag='p', children=[shared]),
            Node(tag='q', children=[shared]),
        ])
        
        tags = [visit.node.tag for visit in walk(root)]
        
        assert tags == ['r', 'p', 'x', 'q', 'x']
    
    def test_deep_chain(self):
        """Deep trees walk without hitting the recursion limit."""
        node = Node(tag='n', text='x')
        for _ in range(3000):
            node = Node(tag='n', children=[node])
        
        visits = list(walk(node))
        
        assert len(visits) == 3001
        assert visits[-1].level == 3000
        assert visits[-1].terminal is True
        assert len(visits[-1].path) == 3001
    
    def test_finished_branch_can_be_reentered(self):
        """Ancestors are released when a branch is finished."""
        shared = Node(tag='s', children=[Node(tag='leaf')])
        root = Node(tag='r', children=[shared, Node(tag='w', children=[shared])])
        
        assert [visit.path for visit in walk(root)] == [
            ('r',), ('r', 's'), ('r', 's', 'leaf'),
            ('r', 'w'), ('r', 'w', 's'), ('r', 'w', 's', 'leaf'),
        ]


class TestResolveAddress:
    """Test suite for address resolution."""
    
    def test_resolves_repeated_instances_in_order(self, flat_listings):
        instances = resolve_address('/root/listing', flat_listings)
        
        assert len(instances) == 2
        assert instances[0].children[0].text == 'paypal'
        assert instances[1].children[0].text == 'cod'
    
    def test_root_address(self, flat_listings):
        assert resolve_address('/root', flat_listings) == [flat_listings]
    
    def test_no_match_returns_empty(self, flat_listings):
        assert resolve_address('/root/missing', flat_listings) == []
        assert resolve_address('/other/listing', flat_listings) == []
    
    def test_nodeset_members_are_roots(self, flat_listings):
        listings = Nodeset(nodes=flat_listings.children)
        
        assert len(resolve_address('/listing/payment_types', listings)) == 2
