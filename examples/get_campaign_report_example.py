from sedotmp_client.toolbox import report_to_dataframe
from sedotmp_client import SedoTmpClient

if __name__ == "__main__":
    # Credentials are read from SEDOTMP_CLIENT_ID / SEDOTMP_CLIENT_SECRET
    client = SedoTmpClient()

    # Facade Pattern, SedoTmpClient is an entry point.
    categories = client.content.get_categories()

    # First page of content campaigns
    campaigns = client.platform.get_content_campaigns(0)

    # Daily campaign report for January 2024, NDJSON decoded to records
    report = client.platform.get_campaign_report(
        dimensions=["DATE", "COUNTRY"],
        filter={
            "startDate": {"year": 2024, "month": 1, "day": 1},
            "endDate": {"year": 2024, "month": 1, "day": 31},
        },
        sort="CLICKS,desc",
        pagination={"offset": 0, "limit": 100},
    )

    df = report_to_dataframe(report)
    print(df.head())
