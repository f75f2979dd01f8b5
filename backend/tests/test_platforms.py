import unittest

from fakecheck.deadline import Deadline
from fakecheck.errors import AnalysisTimeoutError, UnsupportedPlatformError
from fakecheck.platforms import detect_platform
from fakes import FakeClock


class TestDetectPlatform(unittest.TestCase):
    def test_domains(self):
        cases = {
            "https://www.facebook.com/john.smith": "facebook",
            "https://fb.com/john.smith": "facebook",
            "https://www.instagram.com/jane.doe/": "instagram",
            "https://twitter.com/jane_doe": "twitter",
            "https://X.com/jane_doe": "twitter",
        }
        for url, platform in cases.items():
            self.assertEqual(detect_platform(url), platform, url)

    def test_unsupported(self):
        for url in ["https://www.linkedin.com/in/jane", "", None]:
            with self.assertRaises(UnsupportedPlatformError):
                detect_platform(url)


class TestDeadline(unittest.TestCase):
    def test_budget(self):
        clock = FakeClock()
        d = Deadline(3000, clock=clock)
        self.assertEqual(d.remaining_ms(), 3000)
        self.assertEqual(d.bound(30000), 3000)
        clock.advance(2500)
        self.assertEqual(d.bound(1000), 500)
        d.check("extraction")
        clock.advance(600)
        self.assertTrue(d.expired())
        self.assertEqual(d.bound(1000), 0)
        with self.assertRaises(AnalysisTimeoutError) as cm:
            d.check("extraction")
        self.assertEqual(str(cm.exception), "analysis exceeded 3000ms during extraction")


if __name__ == "__main__":
    unittest.main()
