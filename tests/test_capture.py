import unittest
from unittest.mock import patch, MagicMock, AsyncMock
from contextlib import asynccontextmanager
from pathlib import Path
import os
import sys
import tempfile

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flotilla_watch.services.capture import capture_screenshot


def make_fake_launcher(browser, events):
    """Stand-in for launch_browser that records when the browser is released."""

    @asynccontextmanager
    async def launch():
        events.append("launched")
        try:
            yield browser
        finally:
            events.append("closed")

    return launch


class TestCaptureScreenshot(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.directory = Path(self._tmp.name) / "screenshots"
        self.events = []

        self.locator = MagicMock()
        self.locator.first.screenshot = AsyncMock(
            side_effect=lambda path: Path(path).write_bytes(b"\x89PNG\r\n\x1a\n")
        )
        self.page = MagicMock()
        self.page.goto = AsyncMock()
        self.page.wait_for_selector = AsyncMock()
        self.page.wait_for_timeout = AsyncMock()
        self.page.locator.return_value = self.locator
        self.browser = MagicMock()
        self.browser.new_page = AsyncMock(return_value=self.page)

    def tearDown(self):
        self._tmp.cleanup()

    async def test_success_writes_canvas_png(self):
        with patch('flotilla_watch.services.capture.launch_browser',
                   make_fake_launcher(self.browser, self.events)):
            result = await capture_screenshot("https://example.test/", self.directory)

        self.assertTrue(result.is_ok)
        artifact = result.value
        self.assertTrue(artifact.file_path.exists())
        self.assertEqual(artifact.file_path.parent, self.directory)
        self.assertRegex(
            artifact.file_path.name,
            r"^flotilla-canvas-\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z\.png$",
        )
        self.assertEqual(self.events, ["launched", "closed"])

        self.browser.new_page.assert_awaited_once_with(viewport={"width": 1920, "height": 1080})
        self.page.goto.assert_awaited_once_with("https://example.test/", wait_until="networkidle")
        self.page.wait_for_selector.assert_awaited_once_with("canvas", timeout=30000)
        self.page.wait_for_timeout.assert_awaited_once_with(5000)
        self.page.locator.assert_called_with("canvas")

    async def test_element_timeout_returns_no_artifact_and_closes_browser(self):
        self.page.wait_for_selector.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded.")

        with patch('flotilla_watch.services.capture.launch_browser',
                   make_fake_launcher(self.browser, self.events)):
            result = await capture_screenshot("https://example.test/", self.directory)

        self.assertTrue(result.is_failed)
        self.assertIsNone(result.value)
        self.assertIn("Timeout", result.reason)
        self.assertEqual(self.events, ["launched", "closed"])
        self.locator.first.screenshot.assert_not_awaited()
        self.assertEqual(list(self.directory.iterdir()), [])

    async def test_element_timeout_closes_real_launched_browser(self):
        self.page.wait_for_selector.side_effect = PlaywrightTimeoutError("Timeout 30000ms exceeded.")
        self.browser.close = AsyncMock()

        playwright = MagicMock()
        playwright.chromium.launch = AsyncMock(return_value=self.browser)
        driver = MagicMock()
        driver.__aenter__ = AsyncMock(return_value=playwright)
        driver.__aexit__ = AsyncMock(return_value=False)

        with patch('flotilla_watch.clients.browser.async_playwright', return_value=driver):
            result = await capture_screenshot("https://example.test/", self.directory)

        self.assertTrue(result.is_failed)
        playwright.chromium.launch.assert_awaited_once_with(
            headless=True, args=["--no-sandbox", "--disable-setuid-sandbox"]
        )
        self.browser.close.assert_awaited_once()
        driver.__aexit__.assert_awaited_once()
        self.locator.first.screenshot.assert_not_awaited()

    async def test_navigation_failure_closes_browser(self):
        self.page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")

        with patch('flotilla_watch.services.capture.launch_browser',
                   make_fake_launcher(self.browser, self.events)):
            result = await capture_screenshot("https://example.test/", self.directory)

        self.assertTrue(result.is_failed)
        self.assertEqual(self.events, ["launched", "closed"])
        self.page.wait_for_selector.assert_not_awaited()

    async def test_launch_failure_is_soft(self):
        @asynccontextmanager
        async def failing_launch():
            raise PlaywrightError("Executable doesn't exist")
            yield  # pragma: no cover

        with patch('flotilla_watch.services.capture.launch_browser', failing_launch):
            result = await capture_screenshot("https://example.test/", self.directory)

        self.assertTrue(result.is_failed)
        self.assertTrue(self.directory.is_dir())

    async def test_write_error_is_soft(self):
        self.locator.first.screenshot.side_effect = OSError("No space left on device")

        with patch('flotilla_watch.services.capture.launch_browser',
                   make_fake_launcher(self.browser, self.events)):
            result = await capture_screenshot("https://example.test/", self.directory)

        self.assertTrue(result.is_failed)
        self.assertEqual(self.events, ["launched", "closed"])


if __name__ == '__main__':
    unittest.main()
