"""Line readers for plain-text inputs."""
