import unittest

from fastapi.testclient import TestClient

from core.domain import LineMeta
from main import app
from services.factory import MushafCorpora, get_corpora, get_page_layout_service
from services.page_layout_service import NO_PAGE_DATA_REASON, PageLayoutService
from fakes import (
    FATIHAH_AYAH_WORDS,
    BrokenPreciseCorpus,
    FakeFlatCorpus,
    FakeLayoutMetadata,
    FakePreciseCorpus,
    flat_words_for,
    precise_words_for_lines,
)


class TestMushafEndpoints(unittest.TestCase):
    """Lifespan is not entered; corpora come from dependency overrides."""

    def setUp(self):
        self.corpora = MushafCorpora(
            precise=FakePreciseCorpus({
                2: precise_words_for_lines({
                    3: [(2, 1, 1)],
                    4: [(2, 2, 1), (2, 2, 2), (2, 2, 3)],
                }),
            }, total=83668),
            flat=FakeFlatCorpus({1: flat_words_for(1, FATIHAH_AYAH_WORDS)}, total=77430),
            layout_metadata=FakeLayoutMetadata({
                2: [
                    LineMeta(line_number=1, line_type="surah_name", surah_number=2, is_centered=True),
                    LineMeta(line_number=2, line_type="basmala", is_centered=True),
                ],
            }),
        )
        app.dependency_overrides[get_corpora] = lambda: self.corpora
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _override_service(self, service):
        app.dependency_overrides[get_page_layout_service] = lambda: service

    # ---------- page layout ----------

    def test_invalid_page_numbers(self):
        for page in (0, 605, -3):
            response = self.client.get(f"/mushaf/page/{page}")
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json()["detail"], "Invalid page number. Must be between 1 and 604.")

        self.assertEqual(self.corpora.precise.calls, [])
        self.assertEqual(self.corpora.flat.calls, [])

    def test_non_numeric_page_is_same_client_error(self):
        for page in ("abc", "1.5", "2e2", "%20"):
            response = self.client.get(f"/mushaf/page/{page}")
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json()["detail"], "Invalid page number. Must be between 1 and 604.")

        self.assertEqual(self.corpora.precise.calls, [])

    def test_precise_page_response_shape(self):
        response = self.client.get("/mushaf/page/2")
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["page"], 2)
        self.assertEqual(len(body["words"]), 4)
        self.assertEqual(body["meta"], {"totalWords": 77430, "source": "precise", "juz": 1})
        self.assertEqual(body["surahForPage"], 2)
        self.assertIsNone(body["error"])
        self.assertIsNone(body["errorCode"])

        word = body["words"][0]
        self.assertEqual(set(word), {"wordIndex", "surah", "ayah", "position", "text", "lineNumber"})
        self.assertEqual(set(word["position"]), {"x", "y", "width", "height"})

        lines = body["layout"]["lines"]
        self.assertEqual([line["lineNumber"] for line in lines], [3, 4])
        self.assertEqual(lines[0]["lineType"], "ayah")
        self.assertEqual(set(lines[0]), {"lineNumber", "lineType", "surahNumber", "isCentered", "words"})

        self.assertEqual(body["layoutMeta"][0], {
            "line_number": 1, "line_type": "surah_name", "surah_number": 2, "is_centered": True
        })

    def test_approximate_page(self):
        body = self.client.get("/mushaf/page/1").json()

        self.assertEqual(body["meta"]["source"], "approximate")
        self.assertEqual(len(body["words"]), sum(FATIHAH_AYAH_WORDS))
        self.assertEqual(body["surahForPage"], 1)
        self.assertEqual(body["layoutMeta"], [])

    def test_empty_page_is_not_an_error_status(self):
        response = self.client.get("/mushaf/page/400")
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["words"], [])
        self.assertEqual(body["layout"], {"lines": []})
        self.assertEqual(body["error"], NO_PAGE_DATA_REASON)
        self.assertEqual(body["errorCode"], "NO_PAGE_DATA")
        self.assertEqual(body["meta"]["totalWords"], 77430)
        self.assertEqual(body["meta"]["source"], "approximate")

    def test_provider_failure_is_500(self):
        self._override_service(PageLayoutService(BrokenPreciseCorpus(), FakeFlatCorpus(), FakeLayoutMetadata()))

        response = self.client.get("/mushaf/page/10")
        self.assertEqual(response.status_code, 500)
        detail = response.json()["detail"]
        self.assertEqual(detail["error"], "Internal server error")
        self.assertIn("malformed", detail["message"])
        self.assertEqual(detail["code"], "LAYOUT_FAILED")

    # ---------- reference data ----------

    def test_surah_list(self):
        surahs = self.client.get("/mushaf/surahs").json()["surahs"]
        self.assertEqual(len(surahs), 114)
        self.assertEqual(surahs[0]["englishName"], "Al-Fatihah")
        self.assertEqual(surahs[1]["startPage"], 2)

    def test_juz_list(self):
        juz = self.client.get("/mushaf/juz").json()["juz"]
        self.assertEqual(len(juz), 30)
        self.assertEqual(juz[-1]["endPage"], 604)

    def test_surah_by_id(self):
        response = self.client.get("/mushaf/surahs/36")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["englishName"], "Ya-Sin")
        self.assertEqual(self.client.get("/mushaf/surahs/115").status_code, 404)

    def test_page_info(self):
        body = self.client.get("/mushaf/page/49/info").json()
        self.assertEqual(body["page"], 49)
        self.assertEqual(body["surah"]["id"], 2)
        self.assertEqual(body["juz"]["id"], 3)

        self.assertEqual(self.client.get("/mushaf/page/0/info").status_code, 400)

    def test_locate_ayah(self):
        self.assertEqual(self.client.get("/mushaf/locate", params={"surah": 2, "ayah": 142}).json(),
                         {"surah": 2, "ayah": 142, "page": 22, "juz": 2})
        # Juz 3 starts before Aal Imran; the surah start page wins
        self.assertEqual(self.client.get("/mushaf/locate", params={"surah": 3}).json()["page"], 50)

        self.assertEqual(self.client.get("/mushaf/locate", params={"surah": 1, "ayah": 8}).status_code, 400)
        self.assertEqual(self.client.get("/mushaf/locate", params={"surah": 115}).status_code, 422)

    # ---------- status ----------

    def test_status(self):
        body = self.client.get("/status").json()

        self.assertTrue(body["precise_corpus"]["available"])
        self.assertEqual(body["precise_corpus"]["total_words"], 83668)
        self.assertEqual(body["flat_corpus"]["total_words"], 77430)
        self.assertTrue(body["layout_metadata_available"])
        self.assertTrue(body["ready_for_queries"])


if __name__ == "__main__":
    unittest.main()
