import unittest
from unittest.mock import patch, MagicMock

from meme_generator.services import assets as assets_svc
from meme_generator.services.errors import AssetDownloadError


class TestAssetsService(unittest.TestCase):
    def _mock_urlopen(self, payload: bytes = b"PNGDATA"):
        mm = MagicMock()
        mm.read.return_value = payload
        ctx = MagicMock()
        ctx.__enter__.return_value = mm
        ctx.__exit__.return_value = False
        return ctx

    @patch("urllib.request.urlopen")
    def test_fetch_image_bytes_returns_payload(self, mock_urlopen):
        mock_urlopen.return_value = self._mock_urlopen(b"\x89PNG\r\n")

        data = assets_svc.fetch_image_bytes("https://example/image.png")
        self.assertTrue(data.startswith(b"\x89PNG"))
        request = mock_urlopen.call_args[0][0]
        self.assertEqual(request.full_url, "https://example/image.png")
        self.assertEqual(request.get_header("User-agent"), "Mozilla/5.0")

    @patch("urllib.request.urlopen", side_effect=RuntimeError("network"))
    def test_fetch_image_bytes_raises_typed_error(self, mock_urlopen):
        with self.assertRaises(AssetDownloadError):
            assets_svc.fetch_image_bytes("https://example/image.png")


if __name__ == "__main__":
    unittest.main()
