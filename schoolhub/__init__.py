"""SchoolHub: social feed backend for a school community."""
