"""
Tests für den Textbericht.
"""

from distortion_analyzer.cli import main


class TestCli:
    """Tests für die Kommandozeile."""
    
    def test_list(self, capsys):
        """--list zeigt alle Shaper."""
        assert main(["--list"]) == 0
        
        out = capsys.readouterr().out
        for key in ("none", "hard", "softTanh", "softCubic", "softArctan"):
            assert key in out
    
    def test_report(self, capsys):
        """Bericht für einen Shaper."""
        assert main(["--shaper", "hard", "--drive", "3"]) == 0
        
        out = capsys.readouterr().out
        assert "Hard Clip" in out
        assert "heavy distortion" in out
        assert "Residual RMS" in out
        assert "Soft (tanh)" not in out
    
    def test_default_selection(self, capsys):
        """Ohne Auswahl werden die Standard-Shaper analysiert."""
        assert main([]) == 0
        
        out = capsys.readouterr().out
        assert "Hard Clip" in out
        assert "Soft (arctan)" in out
        assert "== Clean" not in out
    
    def test_invalid_knee(self, capsys):
        """Ungültiges Knee führt zu Exit-Code 2."""
        assert main(["--knee", "2"]) == 2
