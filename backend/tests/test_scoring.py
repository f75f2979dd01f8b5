import unittest

from fakecheck.scoring import confidence, is_fake, is_suspicious_username, score_profile
from fakecheck.types import PictureClassification, ProfileSnapshot

YEAR = 2026


def snap(**kw):
    kw.setdefault("platform", "twitter")
    return ProfileSnapshot(**kw)


def deltas(indicators):
    return [(i.factor, i.impact) for i in indicators]


class TestScenarios(unittest.TestCase):
    def test_suspicious_profile_scores_near_floor(self):
        s = snap(has_profile_picture=False, username="john_doe99999", has_bio=False, followers=5, following=300)
        score, indicators = score_profile(s, current_year=YEAR)
        self.assertEqual(score, 15)
        self.assertTrue(is_fake(score))
        self.assertEqual(confidence(score), 60)
        self.assertEqual(
            deltas(indicators),
            [("Profile Picture", "high"), ("Username", "medium"), ("Bio", "low"), ("Follow Ratio", "high")],
        )

    def test_healthy_profile(self):
        s = snap(
            has_profile_picture=True,
            username="alice",
            has_bio=True,
            post_count=42,
            followers=500,
            following=200,
            join_date="March 2018",
            post_captions=["hi"],
        )
        score, indicators = score_profile(s, PictureClassification(is_human=True, confidence=0.8), current_year=YEAR)
        self.assertEqual(score, 85)
        self.assertFalse(is_fake(score))
        # account age bonus adds no indicator
        self.assertEqual(
            deltas(indicators),
            [("Profile Picture", "positive"), ("Bio", "positive"), ("Post Content", "positive")],
        )

    def test_score_is_clamped_at_zero(self):
        s = snap(
            platform="instagram",
            has_profile_picture=False,
            username="real_fake_acc_1234",
            has_bio=False,
            post_count=0,
            followers=2,
            following=900,
            join_date="Joined January 2026",
            post_captions=[],
            has_tagged_content=False,
            friend_count=1,
        )
        score, indicators = score_profile(s, current_year=YEAR)
        self.assertEqual(score, 0)
        self.assertEqual(confidence(score), 90)
        self.assertEqual(len(indicators), 9)

    def test_deterministic(self):
        s = snap(has_profile_picture=True, username="bob", has_bio=True, post_captions=["#a " * 20])
        pic = PictureClassification(stock_photo=True, is_human=False, confidence=0.65)
        first = score_profile(s, pic, current_year=YEAR)
        for _ in range(5):
            self.assertEqual(score_profile(s, pic, current_year=YEAR), first)


class TestPictureRules(unittest.TestCase):
    def test_missing_picture_always_costs_15(self):
        for pic in (None, PictureClassification(is_human=True, confidence=0.8)):
            score, indicators = score_profile(snap(has_profile_picture=False, has_bio=True), pic, current_year=YEAR)
            self.assertEqual(score, 60 - 15 + 5)
            self.assertEqual(indicators[0].impact, "high")

    def test_stock_photo(self):
        pic = PictureClassification(is_human=True, stock_photo=True, confidence=0.65)
        score, indicators = score_profile(snap(has_profile_picture=True, has_bio=True), pic, current_year=YEAR)
        # human takes precedence over stock, as the bands mark large photos as both
        self.assertEqual(score, 75)
        pic = PictureClassification(is_human=False, stock_photo=True, confidence=0.65)
        score, indicators = score_profile(snap(has_profile_picture=True, has_bio=True), pic, current_year=YEAR)
        self.assertEqual(score, 55)
        self.assertEqual(deltas(indicators)[0], ("Profile Picture", "medium"))

    def test_undetermined_picture(self):
        pic = PictureClassification(error="picture download returned HTTP 404")
        score, indicators = score_profile(snap(has_profile_picture=True, has_bio=True), pic, current_year=YEAR)
        self.assertEqual(score, 70)
        self.assertEqual(indicators[0].issue, "Profile has a picture")

    def test_uses_merged_classification(self):
        s = snap(has_profile_picture=True, has_bio=True, profile_picture_analysis=PictureClassification(is_human=True, confidence=0.8))
        self.assertEqual(score_profile(s, current_year=YEAR)[0], 75)


class TestUsername(unittest.TestCase):
    def test_patterns(self):
        for name in ["john_doe99999", "a_b_c_d", "theOfficialBob", "realjohn", "12345678", "Authentic.Shop"]:
            self.assertTrue(is_suspicious_username(name), name)
        for name in ["alice", "bob_smith", "jo123", ""]:
            self.assertFalse(is_suspicious_username(name), name)


class TestCountRules(unittest.TestCase):
    def test_few_posts(self):
        score, indicators = score_profile(snap(has_profile_picture=True, has_bio=True, post_count=2), current_year=YEAR)
        self.assertEqual(score, 60)
        self.assertIn(("Post Count", "medium"), deltas(indicators))
        score, _ = score_profile(snap(has_profile_picture=True, has_bio=True, post_count=3), current_year=YEAR)
        self.assertEqual(score, 70)

    def test_high_ratio(self):
        s = snap(has_profile_picture=True, has_bio=True, followers=20, following=300)
        score, indicators = score_profile(s, current_year=YEAR)
        self.assertEqual(score, 60)
        self.assertIn(("Follow Ratio", "medium"), deltas(indicators))

    def test_ratio_needs_both_counts(self):
        s = snap(has_profile_picture=True, has_bio=True, followers=None, following=5000)
        self.assertIsNone(s.follow_ratio)
        self.assertEqual(score_profile(s, current_year=YEAR)[0], 70)

    def test_explicit_ratio_dropped_without_counts(self):
        s = snap(has_profile_picture=True, has_bio=True, follow_ratio=20)
        self.assertIsNone(s.follow_ratio)
        self.assertEqual(score_profile(s, current_year=YEAR)[0], 70)
        s = snap(has_profile_picture=True, has_bio=True, followers=50, follow_ratio=20)
        self.assertIsNone(s.follow_ratio)

    def test_zero_followers(self):
        s = snap(has_profile_picture=True, has_bio=True, followers=0, following=50)
        self.assertEqual(s.follow_ratio, 0)
        self.assertEqual(score_profile(s, current_year=YEAR)[0], 70)

    def test_friend_count(self):
        fb = dict(platform="facebook", has_profile_picture=True, has_bio=True)
        score, indicators = score_profile(snap(friend_count=9, **fb), current_year=YEAR)
        self.assertEqual(score, 60)
        self.assertEqual(indicators[-1].factor, "Friend Count")
        self.assertEqual(score_profile(snap(friend_count=10, **fb), current_year=YEAR)[0], 70)

    def test_tagged_content(self):
        ig = dict(platform="instagram", has_profile_picture=True, has_bio=True)
        self.assertEqual(score_profile(snap(has_tagged_content=False, **ig), current_year=YEAR)[0], 65)
        self.assertEqual(score_profile(snap(has_tagged_content=True, **ig), current_year=YEAR)[0], 70)


class TestAgeAndContent(unittest.TestCase):
    base = dict(has_profile_picture=True, has_bio=True)

    def test_new_account(self):
        score, indicators = score_profile(snap(join_date="Joined October 2026", **self.base), current_year=YEAR)
        self.assertEqual(score, 60)
        self.assertEqual(indicators[-1].factor, "Account Age")

    def test_unparseable_join_date_is_ignored(self):
        score, _ = score_profile(snap(join_date="Joined 2019", **self.base), current_year=YEAR)
        self.assertEqual(score, 70)

    def test_spammy_captions(self):
        score, indicators = score_profile(snap(post_captions=["ok", "#x" * 16], **self.base), current_year=YEAR)
        self.assertEqual(score, 70)
        self.assertEqual(deltas(indicators)[-1], ("Post Content", "low"))
        score, _ = score_profile(snap(post_captions=["\U0001F600" * 11], **self.base), current_year=YEAR)
        self.assertEqual(score, 70)

    def test_empty_captions(self):
        score, indicators = score_profile(snap(post_captions=[], **self.base), current_year=YEAR)
        self.assertEqual(score, 65)
        self.assertEqual(indicators[-1].issue, "No visible posts")

    def test_external_links_are_neutral(self):
        a = score_profile(snap(has_external_links=True, **self.base), current_year=YEAR)
        b = score_profile(snap(has_external_links=False, **self.base), current_year=YEAR)
        self.assertEqual(a, b)


class TestVerdict(unittest.TestCase):
    def test_threshold_and_confidence(self):
        self.assertTrue(is_fake(44))
        self.assertFalse(is_fake(45))
        self.assertEqual(confidence(45), 0)
        self.assertEqual(confidence(0), 90)
        # unclamped on the high tail
        self.assertEqual(confidence(100), 110)


if __name__ == "__main__":
    unittest.main()
