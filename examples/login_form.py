#!/usr/bin/env python3
"""
Login Form Example
==================

Shows the page-object element handles on a live page: scoped queries,
typed elements, waits, and reloading an element after the page
re-renders it.

Usage:
    python examples/login_form.py
"""

import logging

from pagekit import ElementQuery, ElementType
from pagekit.core.driver_factory import driver_session


def main():
    """Fill in the demo login form."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    with driver_session(headless=False) as driver:
        driver.get("https://the-internet.herokuapp.com/login")

        form = ElementQuery("id", "login").wait_until_present().one()
        form.highlight()

        form.query("id", "username").as_type(ElementType.INPUT).one().overwrite("tomsmith")
        form.query("id", "password").as_type(ElementType.INPUT).one().overwrite("SuperSecretPassword!")

        button = form.query("css:button[type=submit]").one()
        button.wait_until_clickable().click()

        flash = ElementQuery("id", "flash").wait_until_visible().one()
        print(f"Result: {flash.get_text().strip()}")

        # Refreshing detaches every element; reload() re-binds the handle in place
        heading = ElementQuery("tag", "h2").one()
        driver.refresh()
        print(f"Stale after refresh: {heading.is_stalled()}")
        print(f"Heading: {heading.reload().get_text()}")


if __name__ == "__main__":
    main()
