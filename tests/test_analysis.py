"""
Tests für Konfiguration und Analyse-Pipeline.
"""

import logging

import pytest
import numpy as np

from distortion_analyzer.core.analysis import analyze_shaper, analyze_shapers
from distortion_analyzer.core.catalog import DEFAULT_SELECTION
from distortion_analyzer.core.config import AnalysisConfig, DRIVE_RANGE, KNEE_RANGE


class TestAnalysisConfig:
    """Tests für die Analyse-Konfiguration."""
    
    def test_default_config(self):
        """Standard-Konfiguration ist gültig."""
        config = AnalysisConfig()
        
        assert config.sample_count == 1024
        assert config.cycles == 6
        assert config.fundamental_bin == 6
        assert config.drive == 1.0
        assert config.knee == 0.0
        assert config.num_harmonics == 16
    
    @pytest.mark.parametrize("kwargs", [
        {"sample_count": -1},
        {"cycles": -1},
        {"fundamental_bin": 0},
        {"drive": -0.5},
        {"knee": 1.5},
        {"knee": -0.1},
        {"num_harmonics": -1},
    ])
    def test_invalid_values(self, kwargs):
        """Ungültige Parameter werden abgelehnt."""
        with pytest.raises(ValueError):
            AnalysisConfig(**kwargs)
    
    def test_aliasing_warning(self, caplog):
        """Abweichende Zyklenzahl wird gewarnt."""
        with caplog.at_level(logging.WARNING):
            AnalysisConfig(cycles=4)
        
        assert "alias" in caplog.text
    
    def test_from_ui_clamps(self):
        """UI-Werte werden auf die Regler-Bereiche begrenzt."""
        config = AnalysisConfig.from_ui(drive=10.0, knee=0.0)
        
        assert config.drive == DRIVE_RANGE[1]
        assert config.knee == KNEE_RANGE[0]
    
    def test_max_harmonic(self):
        """Höchste Harmonische unter Nyquist."""
        assert AnalysisConfig().max_harmonic == 16
        assert AnalysisConfig(sample_count=64).max_harmonic == 5
        assert AnalysisConfig(sample_count=0).max_harmonic == -1
    
    def test_frozen(self):
        """Konfiguration ist unveränderlich."""
        config = AnalysisConfig()
        
        with pytest.raises(AttributeError):
            config.drive = 2.0


class TestAnalysisPipeline:
    """Tests für die Analyse einzelner Shaper."""
    
    def test_default_selection_order(self):
        """Ergebnisse folgen der Auswahlreihenfolge."""
        results = analyze_shapers()
        
        assert [r.key for r in results] == list(DEFAULT_SELECTION)
    
    def test_custom_order(self):
        """Eigene Reihenfolge bleibt erhalten."""
        results = analyze_shapers(["softArctan", "hard"])
        
        assert [r.key for r in results] == ["softArctan", "hard"]
    
    def test_clean_has_no_residual(self):
        """Clean-Shaper hat kein Residual."""
        result = analyze_shaper("none", AnalysisConfig(drive=3.0))
        
        assert result.residual_rms == pytest.approx(0.0, abs=1e-12)
    
    def test_hard_clip_result(self):
        """Hard Clip: Residual, Peak und Spektrum passen zusammen."""
        config = AnalysisConfig(drive=3.0)
        result = analyze_shaper("hard", config)
        
        assert len(result.waveform) == config.sample_count
        assert len(result.residual) == config.sample_count
        assert len(result.spectrum) == config.num_harmonics + 1
        assert result.residual_rms > 0.5
        assert result.peak == pytest.approx(1.0)
    
    def test_residual_is_reference_minus_shaped(self):
        """Residual = Referenzsinus - geformtes Signal."""
        result = analyze_shaper("softTanh", AnalysisConfig(drive=2.0))
        
        reference = result.waveform + result.residual
        t = np.arange(1024) / 1024
        np.testing.assert_array_almost_equal(reference, 2.0 * np.sin(2 * np.pi * 6 * t))
    
    def test_knee_reduces_residual(self):
        """Knee verkleinert das Residual."""
        hard = analyze_shaper("softCubic", AnalysisConfig(drive=2.0))
        soft = analyze_shaper("softCubic", AnalysisConfig(drive=2.0, knee=0.8))
        
        assert soft.residual_rms < hard.residual_rms
    
    def test_knee_one(self):
        """Knee = 1 liefert gültige Ergebnisse."""
        results = analyze_shapers(config=AnalysisConfig(drive=6.0, knee=1.0))
        
        for result in results:
            assert np.isfinite(result.residual_rms)
            assert all(np.isfinite(e.db) for e in result.spectrum)
    
    def test_empty_window(self):
        """Leeres Fenster ergibt leere Ergebnisse statt NaN."""
        result = analyze_shaper("hard", AnalysisConfig(sample_count=0))
        
        assert result.spectrum == []
        assert result.residual_rms == 0.0
        assert result.peak == 0.0
    
    def test_unknown_key(self):
        """Unbekannter Shaper wird abgelehnt."""
        with pytest.raises(ValueError):
            analyze_shapers(["hard", "fuzz"])
