from labeling.intent_classifier import IntentType

SAMPLE_CSV = b"keyword,volume\nbuy shoes,500\n123,999\nbest running shoes,300"


def test_process_keywords_success(service):
    response = service.process_keywords(
        ["best shoes", "buy shoes", "shoe sizes"],
        [100, "200", None]
    )

    assert response["success"] is True
    assert response["stats"]["totalKeywords"] == 3
    assert response["stats"]["totalVolume"] == 300
    assert response["stats"]["totalClusters"] == 3
    assert response["keywordsByIntent"]["Commercial"] == [
        {"keyword": "best shoes", "volume": 100, "intent": "Commercial"}
    ]
    assert response["keywordsByIntent"]["Navigational"] == []
    assert "clusters" not in response


def test_process_keywords_mismatched_volumes(service):
    response = service.process_keywords(["a", "b"], [5])
    assert response["stats"]["totalVolume"] == 0


def test_process_keywords_empty(service):
    assert service.process_keywords([]) == {
        "success": False,
        "error": "No keywords provided"
    }


def test_process_keywords_blank_only(service):
    response = service.process_keywords(["  ", ""])

    assert response == {"success": False, "error": "No keywords provided"}
    assert service.last_result is None


def test_process_keywords_keeps_last_result(service):
    service.process_keywords(["nike login"])

    assert service.last_result is not None
    assert service.last_result.bucket(IntentType.NAVIGATIONAL)[0].keyword == "nike login"


def test_process_csv(service):
    response = service.process_csv(SAMPLE_CSV, "keywords.csv")

    assert response["success"] is True
    assert response["allKeywords"] == [
        {"keyword": "buy shoes", "volume": 500, "intent": "Transactional"},
        {"keyword": "best running shoes", "volume": 300, "intent": "Commercial"},
    ]


def test_process_csv_missing_file(service):
    assert service.process_csv(None) == {
        "success": False,
        "error": "No file uploaded"
    }


def test_process_csv_bad_extension(service):
    response = service.process_csv(SAMPLE_CSV, "keywords.json")
    assert response == {
        "success": False,
        "error": "Only CSV or TXT files allowed"
    }


def test_process_csv_without_usable_rows(service):
    response = service.process_csv(b"keyword,volume\n123,4\n", "k.csv")
    assert response == {"success": False, "error": "No keywords provided"}


def test_process_text(service):
    response = service.process_text("best shoes,300\nbuy shoes,500\n")

    assert response["success"] is True
    assert response["stats"]["totalVolume"] == 800
    assert response["stats"]["intentDistribution"]["Transactional"] == 1


def test_include_clusters(service):
    response = service.process_keywords(
        ["a", "b", "c"],
        [1, 2, 3],
        include_clusters=True
    )

    clusters = response["clusters"]
    assert [c["keywords"] for c in clusters] == [["a", "b"], ["c"]]
    assert [c["total_volume"] for c in clusters] == [3, 3]
