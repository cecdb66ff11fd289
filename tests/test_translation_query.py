import unittest
import urllib.parse

from translation_errors import QueryBuildError, TranslationError
from translation_query import CLIENT_ID, ENDPOINT, OUTPUT_FORMAT, build_url, encode_component


def _query(url: str) -> dict:
    return urllib.parse.parse_qs(urllib.parse.urlsplit(url).query, keep_blank_values=True)


class EncodeComponentTests(unittest.TestCase):
    def test_space_and_punctuation_are_escaped(self) -> None:
        self.assertEqual(encode_component("Hello world!"), "Hello%20world%21")

    def test_unreserved_characters_are_kept(self) -> None:
        unreserved = "ABCXYZabcxyz0189-_.~"
        self.assertEqual(encode_component(unreserved), unreserved)

    def test_reserved_characters_are_escaped(self) -> None:
        self.assertEqual(encode_component("a&b?c=d%e/f+g#h"), "a%26b%3Fc%3Dd%25e%2Ff%2Bg%23h")

    def test_non_ascii_is_escaped_per_utf8_byte(self) -> None:
        self.assertEqual(encode_component("é"), "%C3%A9")
        self.assertEqual(encode_component("日本"), "%E6%97%A5%E6%9C%AC")

    def test_lone_surrogate_raises_query_build_error(self) -> None:
        with self.assertRaises(QueryBuildError) as ctx:
            encode_component("bad \ud800 text")
        self.assertIsInstance(ctx.exception, TranslationError)


class BuildUrlTests(unittest.TestCase):
    def test_url_targets_endpoint_with_fixed_parameters(self) -> None:
        url = build_url("Hello", "en", "vi")

        self.assertTrue(url.startswith(ENDPOINT + "?"))
        params = _query(url)
        self.assertEqual(params["client"], [CLIENT_ID])
        self.assertEqual(params["dt"], [OUTPUT_FORMAT])
        self.assertEqual(params["sl"], ["en"])
        self.assertEqual(params["tl"], ["vi"])
        self.assertEqual(params["q"], ["Hello"])

    def test_missing_source_language_means_auto(self) -> None:
        self.assertEqual(_query(build_url("Hello", None, "ja"))["sl"], ["auto"])

    def test_text_parameter_decodes_to_original_input(self) -> None:
        samples = [
            "Hello world",
            "fish & chips?",
            "100% sure",
            "a+b=c; d/e #tag",
            "Xin chào thế giới",
            "こんにちは、世界！",
            "emoji 🦀 crab",
            "line one\nline two\ttab",
        ]
        for text in samples:
            with self.subTest(text=text):
                url = build_url(text, "auto", "vi")
                self.assertEqual(_query(url)["q"], [text])
                self.assertNotIn(" ", url)

    def test_language_codes_are_passed_through(self) -> None:
        params = _query(build_url("Hello", "zh-CN", "pt-BR"))
        self.assertEqual(params["sl"], ["zh-CN"])
        self.assertEqual(params["tl"], ["pt-BR"])

    def test_build_url_is_deterministic(self) -> None:
        self.assertEqual(build_url("Hello", "auto", "vi"), build_url("Hello", "auto", "vi"))


if __name__ == "__main__":  # pragma: no cover - allows direct execution
    unittest.main()
