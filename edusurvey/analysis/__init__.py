from edusurvey.analysis.analyzer import SurveyAnalyzer
from edusurvey.analysis.base import BaseAnalyzer
from edusurvey.analysis.factory import AnalyzerFactory

__all__ = ["AnalyzerFactory", "BaseAnalyzer", "SurveyAnalyzer"]
