"""API pública de compensação ambiental: normas, tipos, modalidades e camadas do SISEMA."""
