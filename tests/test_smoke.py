import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from csv_converter import ConversionOptions
from csv_converter.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_csv_to_json_decodes_latin1_upload():
    # Include a Latin-1 character to force non-ASCII handling
    raw = "name,city\nPaul,Montréal\n".encode("latin-1")

    files = {"file": ("test.csv", raw, "text/csv")}
    r = client.post("/csv-to-json", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["records"] == [{"name": "Paul", "city": "Montréal"}]
    assert data["summary"]["columns"] == ["name", "city"]
    assert data["summary"]["records"] == 1
    assert data["decoding"]["decode_used"]

def test_csv_to_json_strips_utf8_bom():
    raw = "\ufeffid,name\r\n1,A\r\n".encode("utf-8")

    r = client.post("/csv-to-json", files={"file": ("bom.csv", raw, "text/csv")})
    assert r.status_code == 200
    assert r.json()["records"] == [{"id": "1", "name": "A"}]

def test_csv_to_json_without_headers():
    files = {"file": ("data.csv", b"1;2\n3", "text/csv")}
    r = client.post("/csv-to-json", files=files, params={"separator": ";", "has_headers": "false"})
    assert r.status_code == 200
    assert r.json()["records"] == [
        {"col1": "1", "col2": "2"},
        {"col1": "3", "col2": None},
    ]

def test_parse_upload():
    files = {"file": ("data.psv", b'a|b\n\n"x|y"|z\n', "text/plain")}
    r = client.post("/parse", files=files, params={"separator": "|"})
    assert r.status_code == 200
    data = r.json()
    assert data["rows"] == [["a", "b"], ["x|y", "z"]]
    assert data["row_count"] == 2

def test_upload_must_be_delimited_text():
    files = {"file": ("data.xlsx", b"a,b", "application/octet-stream")}
    r = client.post("/csv-to-json", files=files)
    assert r.status_code == 422
    assert r.json()["detail"] == "Only delimited text files are supported"

def test_bad_separator_is_rejected():
    files = {"file": ("data.csv", b"a,b", "text/csv")}
    r = client.post("/parse", files=files, params={"separator": ";;"})
    assert r.status_code == 422
    assert r.json()["argument"] == "separator"

def test_json_to_csv():
    body = {"records": [{"id": 1, "name": "A"}], "headers": ["id", "extra", "name"]}
    r = client.post("/json-to-csv", json=body)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert r.text == "id,extra,name\n1,,A"

def test_json_to_csv_rejects_quote_separator():
    r = client.post("/json-to-csv", json={"records": [{"a": 1}], "separator": '"'})
    assert r.status_code == 422

def test_json_to_xml():
    body = {"records": [{"Name": "Tom & Jerry"}], "root_name": "cartoons", "row_name": "cartoon"}
    r = client.post("/json-to-xml", json=body)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/xml")
    assert "<cartoons>" in r.text
    assert "<Name>Tom &amp; Jerry</Name>" in r.text

def test_json_to_xml_strict_collision():
    body = {"records": [{"a b": "1", "ab": "2"}], "strict": True}
    r = client.post("/json-to-xml", json=body)
    assert r.status_code == 422
    assert r.json()["argument"] == "records"

def test_csv_to_xml():
    files = {"file": ("inventory.csv", b"Name|Value\nAlice|100", "text/csv")}
    params = {"separator": "|", "root_name": "Inventory", "row_name": "Item"}
    r = client.post("/csv-to-xml", files=files, params=params)
    assert r.status_code == 200
    assert "<Item>\n    <Name>Alice</Name>\n    <Value>100</Value>\n  </Item>" in r.text

def test_conversion_options_defaults_and_validation():
    options = ConversionOptions()
    assert options.separator == ","
    assert options.has_headers is True

    with pytest.raises(ValidationError):
        ConversionOptions(separator="||")
