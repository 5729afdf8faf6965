import unittest

from memdrive.util.mime import FileKind, PreviewKind, classify_preview, file_kind


class TestUtilMime(unittest.TestCase):
    def test_classify_preview_media_prefixes(self) -> None:
        self.assertIs(classify_preview("image/png"), PreviewKind.IMAGE)
        self.assertIs(classify_preview("video/mp4"), PreviewKind.VIDEO)
        self.assertIs(classify_preview("audio/mpeg"), PreviewKind.AUDIO)

    def test_classify_preview_is_case_sensitive(self) -> None:
        self.assertIs(classify_preview("IMAGE/JPEG"), PreviewKind.GENERIC)
        self.assertIs(classify_preview("Video/mp4"), PreviewKind.GENERIC)
        # No trimming either.
        self.assertIs(classify_preview(" image/png"), PreviewKind.GENERIC)

    def test_classify_preview_generic_fallback(self) -> None:
        self.assertIs(classify_preview("application/pdf"), PreviewKind.GENERIC)
        self.assertIs(classify_preview(""), PreviewKind.GENERIC)
        self.assertIs(classify_preview(None), PreviewKind.GENERIC)
        # Prefix only, not substring.
        self.assertIs(classify_preview("application/image"), PreviewKind.GENERIC)

    def test_file_kind_media(self) -> None:
        self.assertIs(file_kind("image/gif"), FileKind.IMAGE)
        self.assertIs(file_kind("video/webm"), FileKind.VIDEO)
        self.assertIs(file_kind("audio/ogg"), FileKind.AUDIO)

    def test_file_kind_substring_checks(self) -> None:
        self.assertIs(file_kind("application/pdf"), FileKind.PDF)
        self.assertIs(file_kind("text/plain"), FileKind.DOCUMENT)
        self.assertIs(file_kind("application/msword-document"), FileKind.DOCUMENT)
        self.assertIs(file_kind("application/vnd.ms-excel"), FileKind.SPREADSHEET)
        self.assertIs(file_kind("application/vnd.oasis.spreadsheet"), FileKind.SPREADSHEET)

    def test_file_kind_ooxml_spreadsheet_reports_document(self) -> None:
        mime = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        self.assertIs(file_kind(mime), FileKind.DOCUMENT)

    def test_file_kind_is_case_sensitive(self) -> None:
        self.assertIs(file_kind("IMAGE/PNG"), FileKind.OTHER)
        self.assertIs(file_kind("application/PDF"), FileKind.OTHER)
        self.assertIs(file_kind("Text/Plain"), FileKind.OTHER)

    def test_file_kind_other(self) -> None:
        self.assertIs(file_kind("application/zip"), FileKind.OTHER)
        self.assertIs(file_kind(""), FileKind.OTHER)
        self.assertIs(file_kind(None), FileKind.OTHER)


if __name__ == "__main__":
    unittest.main()
