"""
Pytest configuration for unit tests.

Provides shared trees and documents used across test modules.
"""

import pytest

from xml_tree_tab.config import reset_settings
from xml_tree_tab.models import Node


LISTINGS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<root>
  <listing>
    <payment_types>paypal</payment_types>
    <shipping_info>free</shipping_info>
    <seller_info>
      <name>bob</name>
      <rating>5</rating>
    </seller_info>
  </listing>
  <listing>
    <payment_types>cod</payment_types>
    <shipping_info>paid</shipping_info>
    <seller_info>
      <name>amy</name>
      <rating></rating>
    </seller_info>
  </listing>
</root>
"""


@pytest.fixture(autouse=True, scope="function")
def fresh_settings():
    """
    Reset the settings singleton around every test.
    
    Tests that monkeypatch XML_TREE_TAB_* variables would otherwise leak
    their values into later tests through the cached instance.
    """
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def listings_xml() -> str:
    """Raw markup with two listings, each holding a nested seller_info."""
    return LISTINGS_XML


@pytest.fixture
def flat_listings() -> Node:
    """root/listing repeated twice, listings holding only terminal children."""
    return Node(tag='root', children=[
        Node(tag='listing', children=[
            Node(tag='payment_types', text='paypal'),
            Node(tag='shipping_info', text='free'),
        ]),
        Node(tag='listing', children=[
            Node(tag='payment_types', text='cod'),
            Node(tag='shipping_info', text='paid'),
        ]),
    ])


@pytest.fixture
def nested_listing() -> Node:
    """Listing with terminal children and a non-terminal seller_info."""
    return Node(tag='root', children=[
        Node(tag='listing', children=[
            Node(tag='payment_types', text='paypal'),
            Node(tag='shipping_info', text='free'),
            Node(tag='seller_info', children=[
                Node(tag='name', text='bob'),
            ]),
        ]),
    ])


@pytest.fixture
def abcd_tree() -> Node:
    """a with terminal child b and non-terminal child c holding terminal d."""
    return Node(tag='a', children=[
        Node(tag='b'),
        Node(tag='c', children=[Node(tag='d')]),
    ])
