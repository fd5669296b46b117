"""
Example: Provision a post-mortem document for an incident.

Prerequisites:
1. Create a Google Cloud Project and enable the Drive API
2. Either create OAuth 2.0 credentials (Desktop application type) and save them
   as 'oauth.json', or create a service account key and save it as 'credentials.json'
3. Create a "Post Incident Review" folder holding a "TEMPLATE" Google Doc

Usage:
    GOOGLE_DRIVE_ID=<shared drive id> python example_provision.py "Team A" "Outage at checkout"
"""

import logging
import sys

from google_drive_provisioner import DriveClient, DriveConfig
from google_drive_provisioner.exceptions import GoogleAPIClientError, AmbiguousResourceError


def main():
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) != 3:
        print(__doc__)
        return 1

    team_name, incident_name = sys.argv[1], sys.argv[2]
    config = DriveConfig.from_env()

    try:
        client = DriveClient.from_config(config)
        result = client.incidents.provision(team_name, incident_name)
    except AmbiguousResourceError as e:
        print(f"✗ {e}")
        print("Remove or rename the duplicates in Drive and try again.")
        return 1
    except GoogleAPIClientError as e:
        print(f"✗ Error: {e}")
        return 1

    print(f"✓ Team folder:      {result.team_folder_id}")
    print(f"✓ Team template:    {result.team_template_id}")
    print(f"✓ Post-mortem link: {result.post_mortem_link}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
