"""Constants for ArcGIS MapServer query endpoints."""

# Geoscience Australia, National Electricity Infrastructure, layer 2 (transmission lines)
GA_TRANSMISSION_LINES_QUERY_URL = (
    "https://services.ga.gov.au/gis/rest/services/"
    "National_Electricity_Infrastructure/MapServer/2/query"
)

GEOJSON_FORMAT = "geojson"
ESRI_JSON_FORMAT = "json"

BASE_QUERY_PARAMS = {
    "where": "1=1",
    "geometryType": "esriGeometryEnvelope",
    "inSR": "4326",
    "spatialRel": "esriSpatialRelIntersects",
    "outFields": "*",
    "returnGeometry": "true",
}
