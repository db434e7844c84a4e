"""
Example usage of pagefactory.

Declares two page classes for Hacker News, opens the front page and
follows the "new" link, letting the page objects do the waiting.
"""

import logging
import re

from playwright.sync_api import sync_playwright

from pagefactory import CollectionsFactory, PageFactory

# Configure logging to see the page lifecycle
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


class HackerNewsPage(PageFactory):
    """Elements shared by every Hacker News page."""

    @classmethod
    def define(cls):
        cls.element("story_table", lambda b: b.locator("#hnmain"))
        cls.p_value("story_title", lambda b, n: b.locator(".titleline > a").nth(n).inner_text())
        cls.link("new")
        cls.link("past")


class FrontPage(HackerNewsPage):

    @classmethod
    def define(cls):
        cls.page_url("https://news.ycombinator.com/")
        cls.expected_element("story_table")
        cls.expected_title("Hacker News")


class NewestPage(HackerNewsPage):

    @classmethod
    def define(cls):
        cls.expected_element("story_table", timeout=10)
        cls.expected_title(re.compile("New Links"))


class Story:
    """Minimal data object: records the title it was created from."""

    def __init__(self, browser, index=0):
        self.browser = browser
        self.index = index
        self.title = None

    def create(self):
        self.title = NewestPage(self.browser).story_title(self.index)


class Stories(CollectionsFactory):
    pass


Stories.method_to_add(Story)


def main():
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=True)
        page = browser.new_page()

        front = FrontPage(page, visit=True)
        print(f"Top story: {front.story_title(0)}")

        front.new()
        newest = NewestPage(page)
        print(f"Now on: {newest.url}")

        stories = Stories()
        for index in range(3):
            stories.add(page, index=index)
        for story in stories:
            print(f"  {story.title}")

        browser.close()


if __name__ == "__main__":
    main()
