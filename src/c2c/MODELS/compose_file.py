"""
Models for the complete compose file handed to the serializer.
"""
from typing import Any, Dict
from pydantic import BaseModel
from .service_definition import ServiceDescriptor, VolumeDescriptor

class ComposeFile(BaseModel):
    """
    A compose file holding one reconstructed service.
    Equivalent to a docker-compose.yml with a services and a volumes section.
    """
    services: Dict[str, ServiceDescriptor] = {}
    volumes: Dict[str, VolumeDescriptor] = {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Renders the file as plain data, leaving out every absent field.

        :return: A dictionary ready for YAML serialization.
        """
        data: Dict[str, Any] = {
            'services': {
                name: service.model_dump(exclude_none=True)
                for name, service in self.services.items()
            }
        }
        if self.volumes:
            data['volumes'] = {
                name: volume.model_dump(exclude_defaults=True)
                for name, volume in self.volumes.items()
            }
        return data
