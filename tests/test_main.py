import main


def test_describe_endpoints_lists_every_route():
    lines = main.describe_endpoints("localhost", 5000)
    assert "  GET  http://localhost:5000/" in lines
    assert "  GET  http://localhost:5000/api/health-check" in lines
    assert "  GET  http://localhost:5000/api/labels/<lang>" in lines
    assert "  POST http://localhost:5000/api/generate-outfits" in lines
    assert not any("static" in line for line in lines)
