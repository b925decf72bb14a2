"""Test basic imports and setup."""

def test_import():
    """Test that the package can be imported."""
    import bold_identify
    assert bold_identify.__version__ == "0.1.0"
    assert callable(bold_identify.identify)


def test_dependencies():
    """Test that core dependencies are available."""
    import requests
    import click
    import pandas
    import Bio
    
    # Basic smoke test
    assert requests.__version__
    assert click.__version__
    assert pandas.__version__
    assert Bio.__version__
