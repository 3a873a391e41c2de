"""Walk the running app in a headless browser: Home -> Categories -> List -> Detail -> Home.

Start the app first (`streamlit run app.py`), then run this script.
Screenshots land next to this file.
"""
import os
import sys

from playwright.sync_api import sync_playwright, expect

BASE_URL = os.environ.get("EXPLORE_BOSTON_URL", "http://localhost:8501")
OUT_DIR = os.path.dirname(os.path.abspath(__file__))


def run_verification():
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        page = browser.new_page()

        page.goto(BASE_URL)
        page.wait_for_selector("text='Welcome!'")
        page.screenshot(path=os.path.join(OUT_DIR, "01_home.png"))

        page.get_by_role("button", name="Start Tour").click()
        expect(page.get_by_text("Tap to view all Museums")).to_be_visible()
        page.screenshot(path=os.path.join(OUT_DIR, "02_categories.png"))

        page.get_by_role("button", name="View 2 places").first.click()
        expect(page.get_by_text("All Museums")).to_be_visible()

        page.get_by_role("button", name="Details").nth(1).click()
        expect(page.get_by_text("Inventive exhibits on science and technology.")).to_be_visible()
        page.screenshot(path=os.path.join(OUT_DIR, "03_detail.png"))

        # Home clears the stack; device back on Home is then swallowed.
        page.get_by_role("button", name="⌂").click()
        page.wait_for_selector("text='Welcome!'")
        expect(page.get_by_text("Device back is disabled on Home.")).to_be_visible()
        page.get_by_role("button", name="◁ Device back").click()
        expect(page.get_by_text("Welcome!")).to_be_visible()
        page.screenshot(path=os.path.join(OUT_DIR, "04_home_cycle.png"))

        browser.close()


if __name__ == "__main__":
    sys.exit(run_verification())
