# tests/test_demo.py
import demo


def test_demo_runs(capsys):
    demo.main()
    out = capsys.readouterr().out
    assert "Rejected:" in out
    assert "Product not found with ID: 6" in out
